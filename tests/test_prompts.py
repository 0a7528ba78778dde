"""Tests for prompt state and the toast."""

from qr_link_scanner import Prompt, PromptButton, PromptPresenter, ToastNotifier


def make_prompt(log, with_negative=True):
    return Prompt(
        title='Open URL?',
        message='https://a.io',
        positive=PromptButton('Yes', lambda: log.append('yes')),
        negative=PromptButton('No', lambda: log.append('no')) if with_negative else None,
        on_dismiss=lambda: log.append('dismiss'),
    )


def test_accept_runs_button_then_dismiss():
    log = []
    presenter = PromptPresenter()
    presenter.show(make_prompt(log))

    presenter.accept()

    assert log == ['yes', 'dismiss']
    assert presenter.active is None


def test_decline_and_plain_dismiss():
    log = []
    presenter = PromptPresenter()
    presenter.show(make_prompt(log))
    presenter.decline()
    presenter.show(make_prompt(log))
    presenter.dismiss()

    assert log == ['no', 'dismiss', 'dismiss']


def test_decline_without_negative_button_is_ignored():
    log = []
    presenter = PromptPresenter()
    presenter.show(make_prompt(log, with_negative=False))

    presenter.decline()

    assert log == []
    assert presenter.active is not None


def test_keys():
    log = []
    presenter = PromptPresenter()
    assert not presenter.handle_key(ord('y'))

    presenter.show(make_prompt(log))
    assert not presenter.handle_key(ord('x'))
    assert presenter.handle_key(13)
    presenter.show(make_prompt(log))
    assert presenter.handle_key(ord('n'))
    presenter.show(make_prompt(log))
    assert presenter.handle_key(27)

    assert log == ['yes', 'dismiss', 'no', 'dismiss', 'dismiss']


def test_showing_over_open_prompt_dismisses_it():
    log = []
    presenter = PromptPresenter()
    presenter.show(make_prompt(log))
    second = make_prompt([])
    presenter.show(second)

    assert log == ['dismiss']
    assert presenter.active is second


def test_toast_expires():
    now = [0.0]
    toast = ToastNotifier(duration=2.0, clock=lambda: now[0])
    toast.show('Scanned: hi')

    assert toast.current() == 'Scanned: hi'
    now[0] = 1.9
    assert toast.current() == 'Scanned: hi'
    now[0] = 2.0
    assert toast.current() is None
