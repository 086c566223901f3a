from diff_annotator.infrastructure.tools.actions.action_outputs import summary_outputs, write_outputs

__all__ = ["summary_outputs", "write_outputs"]
