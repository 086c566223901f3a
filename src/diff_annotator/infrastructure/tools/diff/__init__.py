from diff_annotator.infrastructure.tools.diff.unidiff_parser import UnidiffParser

__all__ = ["UnidiffParser"]
