from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SuggestionRequest:
    """Everything a backend needs for one suggestion call."""

    model: str
    system_prompt: str
    user_prompt: str
    format_instructions: str = ""

    def user_prompt_with_format(self) -> str:
        """User prompt for backends that only get free-text JSON back."""
        if not self.format_instructions:
            return self.user_prompt
        return f"{self.user_prompt}\n{self.format_instructions}"
