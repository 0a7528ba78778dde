"""Tests for the CLI and key handling. Skipped without OpenCV or zbar."""

import numpy as np
import pytest

pytest.importorskip('cv2')
pytest.importorskip('pyzbar.pyzbar')

from qr_link_scanner.app import ScannerApp, build_config, parse_args  # noqa: E402
from qr_link_scanner.config import DEFAULTS  # noqa: E402
from qr_link_scanner.prompts import Prompt, PromptButton  # noqa: E402


@pytest.fixture
def app():
    scanner = ScannerApp(dict(DEFAULTS))
    yield scanner
    scanner.decoder.close()


def test_cli_overrides_config(tmp_path):
    path = tmp_path / 'cfg.yaml'
    path.write_text("camera_id: 3\nlog_level: WARNING\n", encoding='utf-8')

    cfg = build_config(parse_args(['--config', str(path), '--camera', '1', '--log-level', 'debug']))

    assert cfg['camera_id'] == 1
    assert cfg['log_level'] == 'DEBUG'


def test_cli_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit):
        parse_args(['--log-level', 'chatty'])
    assert 'invalid choice' in capsys.readouterr().err


def test_cli_defaults():
    cfg = build_config(parse_args([]))
    assert cfg['camera_id'] == DEFAULTS['camera_id']


def test_quit_keys(app):
    assert app.handle_key(0xFF)
    assert app.handle_key(ord('x'))
    assert not app.handle_key(ord('q'))
    assert not app.handle_key(27)


def test_esc_closes_prompt_instead_of_quitting(app):
    closed = []
    app.presenter.show(Prompt('Scanned Text', 'hello', PromptButton('OK', lambda: None), on_dismiss=lambda: closed.append(1)))

    assert app.handle_key(27)
    assert closed == [1]
    assert app.presenter.active is None


def test_step_admits_latest_frame_and_renders(app):
    app.source.push(np.full((120, 160, 3), 255, dtype=np.uint8))

    app.step()
    app.decoder.close()
    app.foreground.run_pending()

    assert not app.coordinator.scanning_in_progress
    assert app.source.poll() is None
    out = app.render()
    assert out.shape == (120, 160, 3)


def test_render_without_camera_frame(app):
    out = app.render()
    assert out.shape == (DEFAULTS['frame_height'], DEFAULTS['frame_width'], 3)
