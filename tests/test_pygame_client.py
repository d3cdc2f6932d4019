"""
Tests for the pygame front end: key mapping, event polling and the CLI.
"""

import pytest

pygame = pytest.importorskip("pygame")

from flappy_dragon import pygame_client
from flappy_dragon.data_models import Action, GameMode
from flappy_dragon.pygame_client import KEY_ACTIONS, FlappyClient, build_parser, main
from flappy_dragon.settings import load_settings


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def client(headless):
    client = FlappyClient(load_settings(seed=42))
    pygame.event.clear()
    return client


def key_down(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


class TestKeyMapping:
    """Physical keys to logical actions."""

    @pytest.mark.parametrize("key, action", [
        (pygame.K_SPACE, Action.FLAP),
        (pygame.K_ESCAPE, Action.ESCAPE),
        (pygame.K_p, Action.PLAY),
        (pygame.K_q, Action.QUIT),
    ])
    def test_mapping(self, key, action):
        assert KEY_ACTIONS[key] is action

    def test_only_four_keys(self):
        assert len(KEY_ACTIONS) == 4


class TestPollAction:
    """Draining the pygame event queue."""

    def test_no_events(self, client):
        assert client._poll_action() is None
        assert not client.session.quitting

    def test_single_key(self, client):
        key_down(pygame.K_SPACE)
        assert client._poll_action() is Action.FLAP

    def test_first_mapped_key_wins(self, client):
        key_down(pygame.K_a)
        key_down(pygame.K_p)
        key_down(pygame.K_q)
        assert client._poll_action() is Action.PLAY
        # Queue was drained
        assert client._poll_action() is None

    def test_unmapped_key_ignored(self, client):
        key_down(pygame.K_a)
        assert client._poll_action() is None

    def test_window_close_quits(self, client):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        client._poll_action()
        assert client.session.quitting

    def test_polled_action_drives_session(self, client):
        key_down(pygame.K_p)
        client.session.tick(client.console, 0.0, client._poll_action())
        assert client.session.mode is GameMode.PLAYING


class TestCli:
    """Argument parsing and startup errors."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.seed is None
        assert args.spawn_mode == "tick"
        assert args.fps == pygame_client.RENDER_FPS
        assert args.log_level == "INFO"

    def test_seed_and_spawn_mode(self):
        args = build_parser().parse_args(["--seed", "5", "--spawn-mode", "legacy"])
        assert args.seed == 5
        assert args.spawn_mode == "legacy"

    def test_unknown_spawn_mode_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--spawn-mode", "often"])

    @pytest.mark.parametrize("fps", ["0", "-30"])
    def test_non_positive_fps_exits(self, fps):
        with pytest.raises(SystemExit) as excinfo:
            main(["--fps", fps])
        assert excinfo.value.code == 2

    def test_invalid_settings_exit(self, monkeypatch):
        def broken_settings(**overrides):
            raise ValueError("spawn_distance must be positive, got 0")

        monkeypatch.setattr(pygame_client, "load_settings", broken_settings)
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_main_runs_client(self, monkeypatch):
        started = []

        class FakeClient:
            def __init__(self, settings, fps):
                started.append((settings.seed, settings.spawn_mode, fps))

            def run(self):
                started.append("ran")

        monkeypatch.setattr(pygame_client, "FlappyClient", FakeClient)
        assert main(["--seed", "3", "--fps", "30", "--spawn-mode", "legacy"]) == 0
        assert started == [(3, "legacy", 30), "ran"]
