"""Shared parse carriers."""

from yamlnode.pipeline.result import YamlParseResult

__all__ = ["YamlParseResult"]
