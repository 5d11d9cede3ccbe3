"""
End-to-end tests.

Runs recorded sessions through the ``replay`` subcommand.
"""

import json
from argparse import Namespace

import cv2
import pytest


def write_actions(path, actions):
    path.write_text(json.dumps(actions))
    return path


def replay_args(events, **kwargs):
    defaults = dict(
        events=events,
        pages=3,
        offset=(0.0, 0.0),
        page_size=(300, 200),
        render=None,
        sequential_ids=True,
    )
    defaults.update(kwargs)
    return Namespace(**defaults)


ACTIONS = [
    {"action": "press", "x": 10, "y": 10},
    {"action": "move", "x": 110, "y": 60},
    {"action": "release", "x": 110, "y": 60},
    {"action": "page", "to": "next"},
    {"action": "press", "x": 0, "y": 0},
    {"action": "move", "x": 50, "y": 50},
    {"action": "release", "x": 50, "y": 50},
    {"action": "press", "x": 0, "y": 0},
    {"action": "move", "x": 5, "y": 5},
    {"action": "release", "x": 5, "y": 5},
    {"action": "page", "to": "first"},
    {"action": "click_field", "field": "field-1"},
]


class TestReplayWorkflow:
    def test_replay_prints_fields(self, tmp_path, capsys):
        from sigfield_annotation.cli.replay.replay import handle

        events = write_actions(tmp_path / "events.json", ACTIONS)
        handle(replay_args(events))

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "* page=1 id=field-1 box=(10, 10, 100x50)",
            "  page=2 id=field-2 box=(0, 0, 50x50)",
        ]

    def test_replay_with_offset(self, tmp_path, capsys):
        from sigfield_annotation.cli.replay.replay import handle

        events = write_actions(tmp_path / "events.json", ACTIONS[:3])
        handle(replay_args(events, offset=(10.0, 10.0)))

        out = capsys.readouterr().out.splitlines()
        assert out == ["  page=1 id=field-1 box=(0, 0, 100x50)"]

    def test_replay_delete(self, tmp_path, capsys):
        from sigfield_annotation.cli.replay.replay import handle

        actions = ACTIONS[:3] + [
            {"action": "click_field", "field": "field-1"},
            {"action": "press", "x": 121, "y": 10, "source": "delete"},
            {"action": "release", "x": 121, "y": 10, "source": "delete"},
            {"action": "click_delete", "field": "field-1"},
        ]
        events = write_actions(tmp_path / "events.json", actions)
        handle(replay_args(events))

        assert capsys.readouterr().out == ""

    def test_replay_unresolved_source(self, tmp_path, capsys):
        from sigfield_annotation.cli.replay.replay import handle

        actions = [
            {"action": "press", "x": 0, "y": 0},
            {"action": "move", "x": 50, "y": 50},
            {"action": "release", "x": 50, "y": 50, "source": None},
        ]
        events = write_actions(tmp_path / "events.json", actions)
        handle(replay_args(events))
        # Release was ignored, the drag is still open
        assert capsys.readouterr().out == ""

        events = write_actions(
            tmp_path / "events.json", actions + [{"action": "release", "x": 50, "y": 50}]
        )
        handle(replay_args(events))
        assert capsys.readouterr().out.splitlines() == [
            "  page=1 id=field-1 box=(0, 0, 50x50)"
        ]

    def test_replay_render(self, tmp_path):
        from sigfield_annotation.cli.replay.replay import handle

        events = write_actions(tmp_path / "events.json", ACTIONS)
        output = tmp_path / "page.png"
        handle(replay_args(events, render=output))

        image = cv2.imread(str(output))
        assert image is not None
        assert image.shape == (200, 300, 3)
        # Black border of the first field
        assert tuple(image[10, 60]) == (0, 0, 0)

    @pytest.mark.parametrize(
        "actions",
        [
            {"action": "press"},
            [{"action": "jump"}],
            [{"action": "press", "x": 1}],
            [{"action": "press", "x": 1, "y": 1, "source": "toolbar"}],
            [{"action": "page", "to": "middle"}],
            ["press"],
            [{"action": "press", "x": "10", "y": 10}],
            [{"action": "move", "x": 10, "y": None}],
            [{"action": "release", "x": True, "y": 10}],
            [{"action": "page", "to": True}],
            [{"action": "page", "to": "2"}],
            [{"action": ["press"]}],
        ],
    )
    def test_malformed_script_exits(self, tmp_path, actions):
        from sigfield_annotation.cli.replay.replay import handle

        events = write_actions(tmp_path / "events.json", actions)
        with pytest.raises(SystemExit) as excinfo:
            handle(replay_args(events))
        assert excinfo.value.code == 1

    def test_missing_file_exits(self, tmp_path):
        from sigfield_annotation.cli.replay.replay import handle

        with pytest.raises(SystemExit):
            handle(replay_args(tmp_path / "missing.json"))


class TestCommandLine:
    def test_parser_has_replay(self):
        from sigfield_annotation.cli import build_parser

        parser = build_parser()
        args = parser.parse_args(["replay", "events.json", "--pages", "4"])
        assert args.pages == 4
        assert args.fn is not None
