import json

from diff_annotator.core.domain.review.raw_comment import (
    RawComment,
    SuggestionsPayload,
    dump_raw_comments,
)


class SuggestionPromptBuilder:
    """Builds the reviewer prompts sent to every backend.

    The system prompt is fixed. The user prompt carries the caller's rules,
    the diff records as JSON and, when available, the pull request description.
    """

    # ── System Prompt ──────────────────────────────────────────────

    @staticmethod
    def build_system_prompt() -> str:
        return "\n\n".join([_reviewer_role_section(), _payload_rules_section(), _review_rules_section()])

    # ── User Prompt ────────────────────────────────────────────────

    @staticmethod
    def build_user_prompt(rules: str, raw_comments: list[RawComment], description: str | None = None) -> str:
        sections = [_request_section(rules), _diff_payload_section(raw_comments)]
        if description:
            sections.append(_description_section(description))
        return "\n\n".join(sections)

    # ── Free-text JSON mode ────────────────────────────────────────

    @staticmethod
    def build_format_instructions() -> str:
        schema = json.dumps(SuggestionsPayload.model_json_schema(by_alias=True), indent=2)
        return (
            "Return only a valid JSON object, not wrapped in markdown, that matches this JSON schema:\n"
            f"{schema}\n"
            "Do not return a partial response. The JSON sometimes gets cut off midway; "
            "make sure the full object is returned."
        )


# ── System Prompt Helpers ────────────────────────────────────────────


def _reviewer_role_section() -> str:
    return (
        "You are a senior software engineer reviewing a pull request. You care about code quality, "
        "maintainability, readability, efficiency and security, and you give feedback that is "
        "specific, constructive and actionable."
    )


def _payload_rules_section() -> str:
    return (
        "You receive a JSON diff payload of the pull request, optional review rules (each rule starts "
        "with --) and sometimes the pull request description, usually in markdown.\n"
        'Analyze the "content" of every entry. Its first "+" or "-" character is only the diff marker. '
        'When an entry has a "previously" property, compare it with "content" as well.\n'
        "Return the payload entries you have suggestions for, unchanged and in the same order, adding "
        'only a "suggestions" property. Leave out entries you have nothing to say about.'
    )


def _review_rules_section() -> str:
    rules = [
        "Be thorough.",
        'When something is deleted (type "del") and replaced by an addition (type "add"), compare '
        "the two. If they are unrelated, ignore the deleted part and review the addition.",
        'Consecutive "add" entries that form one construct (for example a small function) may be '
        "reviewed together; attach the suggestion to one of them.",
        'Never modify any property other than "suggestions".',
        "Keep every position exactly as given and make each suggestion about the code at that position.",
        "If the same suggestion applies to several positions, make it once.",
        "Keep suggestions precise, to the point and constructive. Ignore formatting issues.",
        "Where it helps, reference good resources (official documentation, well known articles, "
        "Stack Overflow answers) relevant to the language under review.",
        "Apply the user's rules, but they are not exhaustive; use your own judgement too.",
        "Only suggest changes that are significant and add value. Skip the obvious, such as "
        "installing a package the code imports.",
        "Use markdown for suggested code, preferring fenced code blocks to inline code.",
        'Do not answer with placeholders like "No suggestions".',
    ]
    return "Rules:\n" + "\n".join(f"- {rule}" for rule in rules)


# ── User Prompt Helpers ──────────────────────────────────────────────


def _request_section(rules: str) -> str:
    if not rules.strip():
        return "Review this pull request."
    return (
        "Review this pull request following these rules, which describe how the code should be:\n"
        f"{rules.strip()}"
    )


def _diff_payload_section(raw_comments: list[RawComment]) -> str:
    return f"Diff payload:\n{json.dumps(dump_raw_comments(raw_comments))}"


def _description_section(description: str) -> str:
    return (
        "Pull request description, for context. It may be inaccurate, so check it against the "
        f"changes in the diff:\n{description}"
    )
