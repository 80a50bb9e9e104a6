import io

from ghosthunt.cli import main
from ghosthunt.engine.session import GameSession
from ghosthunt.engine.turn import TurnEngine
from ghosthunt.level.tiles import TileType
from ghosthunt.render.ascii import AsciiRenderer, format_frame, render_lines, status_line


def test_render_lines_draws_player_over_ghosts_over_tiles(engine):
    snap = engine.snapshot()
    lines = render_lines(snap)
    assert len(lines) == 18
    assert all(len(line) == 35 for line in lines)
    assert lines[16][23] == "@"
    assert lines[10][10] == "G"
    assert lines[12][4] == "$"
    assert lines[3][5] == "X"


def test_status_line_reports_player_and_ghosts(engine):
    engine.state.player.capture_ghost()
    engine.state.roster.clear(3)
    text = status_line(engine.snapshot())
    assert "Level 1" in text
    assert "Energy 100/100" in text
    assert "Carrying yes" in text
    assert "Ghosts 3/4" in text


def test_ascii_renderer_echoes_frames(scripted_rng):
    out = io.StringIO()
    eng = TurnEngine(renderer=AsciiRenderer(stream=out, echo=True), rng=scripted_rng())
    eng.start_game()
    eng.do_turn()
    assert out.getvalue().count("Level 1") == 2


def test_snapshot_keeps_empty_slots(engine):
    engine.state.roster.clear(1)
    snap = engine.snapshot()
    assert snap.ghosts[1] is None
    assert snap.ghosts_remaining == 3


def test_cli_show_prints_the_level(capsys):
    assert main(["show"]) == 0
    out = capsys.readouterr().out
    assert out.count("$") == 1
    assert "X" in out


def test_cli_run_plays_a_move_script(capsys):
    assert main(["--seed", "3", "run", "LLUU"]) == 0
    out = capsys.readouterr().out
    assert "@" in out
    assert "Turn 5" in out
    assert "Levels completed: 0" in out


def test_cli_run_rejects_bad_moves():
    assert main(["run", "LZ"]) == 1


class _ClearedLevelSession(GameSession):
    """Session whose first level has no ghosts and no breaches left."""

    def start(self):
        super().start()
        state = self.engine.state
        for p in state.grid.find(TileType.BREACH):
            state.grid.set(p.x, p.y, TileType.FLOOR2)
        for i in range(state.roster.capacity):
            state.roster.clear(i)


def test_cli_run_prints_the_board_of_the_new_level(capsys, monkeypatch):
    monkeypatch.setattr("ghosthunt.cli.GameSession", _ClearedLevelSession)
    assert main(["--seed", "1", "run", "L"]) == 0
    out = capsys.readouterr().out
    assert "Level 2  Turn 2" in out
    assert "Level 1" not in out
    assert "Ghosts 4/4" in out
    assert "Levels completed: 1" in out


def test_cli_run_verbose_adds_the_post_turn_board(capsys):
    assert main(["--seed", "3", "run", "-v", "LL"]) == 0
    out = capsys.readouterr().out
    # start frame, one frame per turn, then the final state
    assert out.count("Level 1") == 4
    assert "Turn 3" in out


def test_format_frame_matches_renderer_text(engine):
    renderer = AsciiRenderer()
    snap = engine.snapshot()
    renderer.render(snap)
    assert renderer.frame_text() == format_frame(snap)
    assert format_frame(snap).splitlines()[-1] == status_line(snap)
