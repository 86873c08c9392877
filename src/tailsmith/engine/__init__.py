"""Generation engine."""

from tailsmith.engine.generator import GenerationResult, Generator, split_class_list

__all__ = ["Generator", "GenerationResult", "split_class_list"]
