"""A tiny term language with an evaluator, a term zipper and a terminal viewer."""

__version__ = "0.1.0"
__all__ = ["term", "evaluator", "command", "zipper", "render", "editor"]