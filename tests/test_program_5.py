from pathlib import Path

from hybrid.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_defers_initialization_to_null(capsys):
    main(['--print-result', str(EXAMPLES / 'program_5.hy')])
    out = capsys.readouterr().out.strip()
    assert out == 'null'
