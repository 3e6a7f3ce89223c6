"""
Tests for decoding tool calls from extracted model output.
"""

import pytest

from burrow.tools.base import ListDir, ReadFile, WriteFile
from burrow.tools.parser import ToolParseError, parse_tool_call


class TestRecognizedTools:
    """Valid tool calls map to the right intent."""

    def test_list_dir(self):
        intent = parse_tool_call('{"tool":"list_dir","path":"."}')

        assert intent == ListDir(path=".")

    def test_read_file(self):
        intent = parse_tool_call('{"tool": "read_file", "path": "src/main.rs"}')

        assert isinstance(intent, ReadFile)
        assert intent.path == "src/main.rs"

    def test_write_file(self):
        intent = parse_tool_call(
            '{"tool":"write_file","path":"greeting.txt","content":"hello world"}'
        )

        assert isinstance(intent, WriteFile)
        assert intent.path == "greeting.txt"
        assert intent.content == "hello world"

    def test_write_file_empty_and_multiline_content(self):
        intent = parse_tool_call('{"tool":"write_file","path":"a","content":"x\\ny\\n"}')
        empty = parse_tool_call('{"tool":"write_file","path":"b","content":""}')

        assert intent.content == "x\ny\n"
        assert empty.content == ""

    def test_field_order_and_extra_keys_ignored(self):
        intent = parse_tool_call('{"path":"notes","reason":"look around","tool":"list_dir"}')

        assert intent == ListDir(path="notes")

    def test_parent_paths_are_parsed_not_judged(self):
        # Path safety is the sandbox's job, not the parser's
        intent = parse_tool_call('{"tool":"read_file","path":"../etc/passwd"}')

        assert intent.path == "../etc/passwd"


class TestRejectedInput:
    """Anything that is not exactly a tool call raises ToolParseError."""

    @pytest.mark.parametrize(
        "candidate",
        [
            '{"tool":"delete_file","path":"a.txt"}',
            '{"tool":"run_command","command":"ls"}',
            '{"tool":"LIST_DIR","path":"."}',
            '{"tool":"","path":"."}',
            '{"tool":null,"path":"."}',
            '{"tool":1,"path":"."}',
        ],
    )
    def test_unknown_tool_rejected(self, candidate):
        with pytest.raises(ToolParseError):
            parse_tool_call(candidate)

    @pytest.mark.parametrize(
        "candidate",
        [
            '{"tool":"list_dir"}',
            '{"tool":"read_file"}',
            '{"tool":"write_file","path":"a.txt"}',
            '{"tool":"write_file","content":"x"}',
            '{"path":"a.txt"}',
        ],
    )
    def test_missing_field_rejected(self, candidate):
        with pytest.raises(ToolParseError):
            parse_tool_call(candidate)

    @pytest.mark.parametrize(
        "candidate",
        [
            '{"tool":"list_dir","path":3}',
            '{"tool":"read_file","path":null}',
            '{"tool":"write_file","path":"a.txt","content":5}',
            '{"tool":"write_file","path":"a.txt","content":["x"]}',
        ],
    )
    def test_mistyped_field_rejected(self, candidate):
        with pytest.raises(ToolParseError):
            parse_tool_call(candidate)

    @pytest.mark.parametrize(
        "candidate",
        [
            "",
            "I wrote the file for you.",
            '{"tool":"list_dir","path":"."',
            '[{"tool":"list_dir","path":"."}]',
            '"list_dir"',
            "null",
            '```json\n{"tool":"list_dir","path":"."}\n```',
        ],
    )
    def test_non_object_text_rejected(self, candidate):
        with pytest.raises(ToolParseError):
            parse_tool_call(candidate)
