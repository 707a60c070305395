"""Tests for chat data parsing and data sources."""

import json
from pathlib import Path

import pytest
import yaml

from group_chat_assistant.adapters.data import (
    SAMPLE_CHAT_DATA,
    FileDataSource,
    SampleDataSource,
    detect_format,
    parse_chat_data,
    source_from_config,
)
from group_chat_assistant.config.schema import DataConfig
from group_chat_assistant.models.chat import ReactionKind
from group_chat_assistant.utils.errors import ChatDataError


class TestParseChatData:
    """Tests for parse_chat_data."""

    def test_sample_shape(self) -> None:
        """Test parsing the bundled sample."""
        data = parse_chat_data(SAMPLE_CHAT_DATA)

        assert [m.message_id for m in data.messages] == [1, 2, 3, 4]
        assert data.creator is not None
        assert data.creator.name == "Dave Chan"
        assert data.creator.followers == 1234
        assert data.messages[3].reactions[ReactionKind.SMILE] == 234
        assert data.messages[0].replies[0].reply_count == 3

    def test_optional_fields_default_to_empty(self) -> None:
        """Test that missing reactions, replies and replyCount are empty."""
        data = parse_chat_data(
            {
                "chatMessages": [
                    {
                        "id": 1,
                        "content": "Hello",
                        "replies": [{"id": 2, "username": "amy", "content": "Hi"}],
                    }
                ]
            }
        )
        message = data.messages[0]

        assert message.reactions == {}
        assert message.timestamp == ""
        assert message.replies[0].reactions == {}
        assert message.replies[0].reply_count == 0
        assert data.creator is None

    def test_null_collections(self) -> None:
        """Test that explicit nulls are treated as empty."""
        data = parse_chat_data(
            {"chatMessages": [{"id": 1, "content": "x", "reactions": None, "replies": None}]}
        )
        assert data.messages[0].replies == ()
        assert data.messages[0].total_reactions == 0

    def test_empty_document(self) -> None:
        """Test a document with no messages."""
        assert parse_chat_data({}).messages == ()

    @pytest.mark.parametrize(
        ("raw", "match"),
        [
            ({"chatMessages": [{"id": 1, "content": "x", "reactions": {"wow": 1}}]}, "wow"),
            ({"chatMessages": [{"id": 1, "content": "x", "reactions": {"heart": -1}}]}, "heart"),
            ({"chatMessages": [{"id": 1, "content": "x", "reactions": {"heart": "3"}}]}, "heart"),
            ({"chatMessages": [{"id": 1}]}, "content"),
            ({"chatMessages": [{"content": "x"}]}, "id"),
            ({"chatMessages": [{"id": 1, "content": "x", "replies": [{"id": 2}]}]}, "username"),
            ({"chatMessages": {"id": 1}}, "chatMessages"),
            ({"chatMessages": ["not a message"]}, "mapping"),
            ({"chatMessages": [{"id": 1, "content": "x", "replies": ["oops"]}]}, "reply must be"),
            ({"chatMessages": [{"id": 1, "content": "x", "replies": [5]}]}, "reply must be"),
            (
                {
                    "chatMessages": [
                        {
                            "id": 1,
                            "content": "x",
                            "replies": [
                                {"id": 2, "username": "a", "content": "b", "replyCount": "3"}
                            ],
                        }
                    ]
                },
                "replyCount",
            ),
            ({"creator": {"name": "Dave", "username": "@dave", "followers": "lots"}}, "followers"),
            ({"creator": {"name": "Dave", "username": "@dave", "followers": -1}}, "followers"),
        ],
    )
    def test_malformed(self, raw: dict, match: str) -> None:
        """Test that malformed documents raise ChatDataError."""
        with pytest.raises(ChatDataError, match=match):
            parse_chat_data(raw)

    def test_not_a_mapping(self) -> None:
        """Test that a non-mapping document is rejected."""
        with pytest.raises(ChatDataError):
            parse_chat_data(["chatMessages"])  # type: ignore[arg-type]


class TestSampleDataSource:
    """Tests for SampleDataSource."""

    def test_sample_totals(self) -> None:
        """Test the reaction totals of the sample messages."""
        data = SampleDataSource().load()
        assert [m.total_reactions for m in data.messages] == [60, 414, 366, 591]
        assert [m.reply_total for m in data.messages] == [2, 3, 2, 3]


class TestFileDataSource:
    """Tests for FileDataSource."""

    def test_load_json(self, tmp_path: Path) -> None:
        """Test loading a JSON file."""
        path = tmp_path / "chat.json"
        path.write_text(json.dumps(SAMPLE_CHAT_DATA), encoding="utf-8")

        assert FileDataSource(path).load() == SampleDataSource().load()

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "chat.yml"
        path.write_text(yaml.safe_dump(SAMPLE_CHAT_DATA, allow_unicode=True), encoding="utf-8")

        assert FileDataSource(path).load() == SampleDataSource().load()

    def test_explicit_format(self, tmp_path: Path) -> None:
        """Test an explicit format overriding the suffix."""
        path = tmp_path / "chat.data"
        path.write_text(json.dumps({"chatMessages": []}))

        assert FileDataSource(path, "json").load().messages == ()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="not found"):
            FileDataSource(tmp_path / "missing.json").load()

    def test_undecodable(self, tmp_path: Path) -> None:
        """Test that invalid JSON raises ChatDataError."""
        path = tmp_path / "chat.json"
        path.write_text("{not json")

        with pytest.raises(ChatDataError, match="decode"):
            FileDataSource(path).load()

    def test_unknown_suffix(self, tmp_path: Path) -> None:
        """Test that an undetectable format is rejected."""
        with pytest.raises(ValueError, match="format"):
            FileDataSource(tmp_path / "chat.txt")


class TestHelpers:
    """Tests for format detection and source selection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_detect_format(self, name: str, expected: str) -> None:
        """Test suffix-based format detection."""
        assert detect_format(Path(name)) == expected

    def test_source_from_config_sample(self) -> None:
        """Test that no path selects the sample source."""
        assert isinstance(source_from_config(DataConfig()), SampleDataSource)

    def test_source_from_config_file(self, tmp_path: Path) -> None:
        """Test that a path selects the file source."""
        source = source_from_config(DataConfig(path=tmp_path / "chat.yaml"))

        assert isinstance(source, FileDataSource)
        assert source.path == tmp_path / "chat.yaml"
