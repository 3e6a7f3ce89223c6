"""Protocol module - recovering tool payloads from model output."""

from burrow.protocol.extractor import extract_json_candidate

__all__ = ["extract_json_candidate"]
