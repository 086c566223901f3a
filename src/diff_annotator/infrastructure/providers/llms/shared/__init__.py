from diff_annotator.infrastructure.providers.llms.shared.payload_parser import (
    parse_payload_data,
    parse_payload_text,
    response_json_schema,
)

__all__ = ["parse_payload_data", "parse_payload_text", "response_json_schema"]
