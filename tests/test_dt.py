import datetime
import io

import pytest

from dtstamp import __version__
from dtstamp import clipboard
from dtstamp import dt
from dtstamp import exceptions


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_default_style(local_new_york, capsys):
    assert dt.main(['2024-11-07 12:43:00']) == 0
    assert output_lines(capsys) == [
        'Formatting: 2024-11-07T12:43:00-05:00',
        '<t:1731001380>',
    ]


def test_style_abbreviation(local_new_york, capsys):
    assert dt.main(['2024-11-07 12:43:00', 't']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380:t>'


def test_style_name(local_new_york, capsys):
    assert dt.main(['2024-11-07 12:43:00', 'relative-time']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380:R>'


def test_date_only(local_new_york, capsys):
    assert dt.main(['2024-11-07', 'D']) == 0
    assert output_lines(capsys) == [
        'Formatting: 2024-11-07T00:00:00-05:00',
        '<t:1730955600:D>',
    ]


def test_time_only_is_today(local_new_york, capsys):
    assert dt.main(['12:43:00']) == 0
    (formatting, tag) = output_lines(capsys)
    assert formatting.startswith(f'Formatting: {datetime.date.today().isoformat()}T12:43:00')


def test_style_from_environment(local_new_york, monkeypatch, capsys):
    monkeypatch.setenv('DT_STYLE', 'F')
    assert dt.main(['2024-11-07 12:43:00']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380:F>'


def test_style_argument_beats_environment(local_new_york, monkeypatch, capsys):
    monkeypatch.setenv('DT_STYLE', 'F')
    assert dt.main(['2024-11-07 12:43:00', 'd']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380:d>'


def test_formats_from_options(local_new_york, capsys):
    assert dt.main(['11/07/24 12:43', '-f', '%m/%d/%y %H:%M']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380>'


def test_formats_from_environment(local_new_york, monkeypatch, capsys):
    monkeypatch.setenv('DT_DATE_FORMAT', '%d.%m.%Y')
    assert dt.main(['07.11.2024']) == 0
    assert output_lines(capsys)[-1] == '<t:1730955600>'


def test_invalid_style_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        dt.main(['2024-11-07 12:43:00', 'bogus'])
    assert exc_info.value.code == 2
    assert 'bogus' in capsys.readouterr().err


def test_invalid_style_from_environment(monkeypatch):
    monkeypatch.setenv('DT_STYLE', 'bogus')
    with pytest.raises(SystemExit) as exc_info:
        dt.main(['2024-11-07 12:43:00'])
    assert exc_info.value.code == 2


def test_unparsable_input(local_new_york, capsys, caplog):
    assert dt.main(['not a date']) == 1
    assert capsys.readouterr().out == ''
    assert "'not a date' did not match" in caplog.text


def test_invalid_format_string(local_new_york, caplog):
    assert dt.main(['2024-11-07', '-t', '%H:%Q']) == 1
    assert 'The time format' in caplog.text


def test_nonexistent_local_time(local_new_york, caplog):
    assert dt.main(['2024-03-10 02:30:00']) == 1
    assert 'does not exist' in caplog.text


def test_copy_to_clipboard(local_new_york, monkeypatch, capsys):
    copied = []
    monkeypatch.setattr(clipboard, 'copy', copied.append)
    assert dt.main(['2024-11-07 12:43:00', 'R', '-c']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380:R> copied to clipboard!'
    assert copied == ['<t:1731001380:R>']


def test_clipboard_failure_still_prints(local_new_york, monkeypatch, capsys, caplog):
    def fail(text):
        raise exceptions.ClipboardUnavailable('no copy/paste mechanism')
    monkeypatch.setattr(clipboard, 'copy', fail)
    assert dt.main(['2024-11-07 12:43:00', '--copy-to-clipboard']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380>'
    assert 'no copy/paste mechanism' in caplog.text


def test_input_from_clipboard(local_new_york, monkeypatch, capsys):
    monkeypatch.setattr(clipboard, 'paste', lambda: '2024-11-07 12:43:00')
    assert dt.main(['!c']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380>'


def test_input_from_stdin(local_new_york, monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('2024-11-07\n'))
    assert dt.main(['!i', 't']) == 0
    assert output_lines(capsys)[-1] == '<t:1730955600:t>'


def test_help_style(capsys):
    assert dt.main(['--help-style']) == 0
    out = capsys.readouterr().out
    assert 'short-date-time' in out
    assert '<t:1543392060:f>' in out


def test_help(capsys):
    assert dt.main(['--help']) == 1
    err = capsys.readouterr().err
    assert 'INPUT' in err
    assert '--help-style' in err
    assert '--debug' in err


def test_bare_shows_help(capsys):
    assert dt.main([]) == 1
    assert 'INPUT' in capsys.readouterr().err


def test_style_without_input(caplog):
    assert dt.main(['-c']) == 2
    assert 'INPUT is required' in caplog.text


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        dt.main(['-V'])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f'dt {__version__}'


def test_log_flags_are_removed(local_new_york, capsys):
    assert dt.main(['--debug', '2024-11-07 12:43:00', '--quiet']) == 0
    assert output_lines(capsys)[-1] == '<t:1731001380>'


def test_edge_of_the_calendar(local_new_york, capsys, caplog):
    assert dt.main(['9999-12-31 23:00:00']) == 1
    assert capsys.readouterr().out == ''
    assert 'outside the range' in caplog.text


@pytest.mark.parametrize(
    'argv',
    [
        ['2024-11-07', '--help-style'],
        ['--help-style', '2024-11-07 12:43:00'],
    ],
)
def test_help_style_with_input_is_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        dt.main(argv)
    assert exc_info.value.code == 2
    (out, err) = capsys.readouterr()
    assert out == ''
    assert 'not allowed with argument' in err
