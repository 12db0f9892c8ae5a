import json
from pathlib import Path

import pytest

from hybrid.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=''):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr('builtins.input', fake_input)


def test_repl_evaluates_lines_in_shared_environment(monkeypatch, capsys):
    feed(monkeypatch, ['let x = 5;', 'x = x * 2; x', 'x % 3', 'exit'])
    main([])
    out = capsys.readouterr().out.splitlines()
    assert 'Hybrid Repl v1.0.0' in out
    assert out[-3:] == ['5', '10', '1']


def test_repl_reports_errors_and_continues(monkeypatch, capsys):
    feed(monkeypatch, ['const c = 1;', 'c = 2', 'let 3;', 'y', '1.5', 'c + 1', ''])
    main([])
    out = capsys.readouterr().out.splitlines()
    assert out[-6] == '1'
    assert out[-5].startswith('ConstReassignment: cannot reassign constant c')
    assert out[-4].startswith('ParseError:')
    assert out[-3].startswith('UnresolvedName:')
    assert out[-2].startswith('LexError:')
    assert out[-1] == '2'


def test_repl_knows_booleans_and_null(monkeypatch, capsys):
    feed(monkeypatch, ['true', 'false', 'null', 'true * 2', 'exit'])
    main([])
    assert capsys.readouterr().out.splitlines()[-4:] == ['true', 'false', 'null', 'null']


def test_repl_stops_on_any_line_containing_exit(monkeypatch, capsys):
    feed(monkeypatch, ['1 + 1', 'please exit now', '99'])
    main([])
    out = capsys.readouterr().out
    assert '2' in out
    assert '99' not in out


def test_repl_help(monkeypatch, capsys):
    feed(monkeypatch, ['help'])
    main([])
    assert 'const name = expression;' in capsys.readouterr().out


def test_file_without_print_result_is_silent(capsys):
    main([str(EXAMPLES / 'program_1.hy')])
    assert capsys.readouterr().out == ''


def test_missing_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / 'nope.hy')])
    assert exc_info.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_emit_ast_then_run_ast(tmp_path, capsys):
    source = tmp_path / 'calc.hy'
    source.write_text('let a = 3;\nlet b = a + 2 * (a - 1);\nb\n', encoding='utf-8')
    main(['--emit-ast', str(source)])
    ast_path = Path(capsys.readouterr().out.strip())
    assert ast_path == tmp_path / 'calc.hy.ast.json'
    data = json.loads(ast_path.read_text(encoding='utf-8'))
    assert data['type'] == 'Program'
    assert len(data['body']) == 3

    main(['--print-result', '--ast', str(ast_path)])
    assert capsys.readouterr().out.strip() == '7'


def test_emit_ast_reports_parse_errors(tmp_path, capsys):
    source = tmp_path / 'bad.hy'
    source.write_text('const x;', encoding='utf-8')
    with pytest.raises(SystemExit):
        main(['--emit-ast', str(source)])
    assert 'const requires an initializer' in capsys.readouterr().err
    assert not (tmp_path / 'bad.hy.ast.json').exists()


def test_invalid_ast_file(tmp_path, capsys):
    ast_path = tmp_path / 'broken.ast.json'
    ast_path.write_text('{"type": "WhileLoop"}', encoding='utf-8')
    with pytest.raises(SystemExit):
        main(['--ast', str(ast_path)])
    assert 'invalid AST file' in capsys.readouterr().err


def test_verbose_run_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(['-vv', '--print-result', str(EXAMPLES / 'program_3.hy')])
    assert capsys.readouterr().out.strip() == '9'
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'assign b = 3 (depth 0)' in trace
    assert 'assign a = 3 (depth 0)' in trace
    assert trace.index('assign b') < trace.index('assign a')


def test_long_sum_file_runs(tmp_path, capsys):
    source = tmp_path / 'sum.hy'
    source.write_text('let total = ' + ' + '.join(['2'] * 2000) + ';\ntotal\n', encoding='utf-8')
    main(['--print-result', str(source)])
    assert capsys.readouterr().out.strip() == '4000'


def test_deeply_nested_file_reports_error(tmp_path, capsys):
    source = tmp_path / 'deep.hy'
    source.write_text('(' * 500 + '1' + ')' * 500, encoding='utf-8')
    with pytest.raises(SystemExit) as exc_info:
        main([str(source)])
    assert exc_info.value.code == 1
    assert 'ParseError: expression nested too deeply' in capsys.readouterr().err


def test_repl_continues_after_deep_nesting(monkeypatch, capsys):
    feed(monkeypatch, ['(' * 400 + '1' + ')' * 400, '6 * 7', 'exit'])
    main([])
    out = capsys.readouterr().out.splitlines()
    assert out[-2].startswith('ParseError: expression nested too deeply')
    assert out[-1] == '42'


def test_invalid_utf8_file(tmp_path, capsys):
    source = tmp_path / 'latin.hy'
    source.write_bytes(b'let caf\xe9 = 1;')
    with pytest.raises(SystemExit) as exc_info:
        main([str(source)])
    assert exc_info.value.code == 1
    assert 'Error: cannot read' in capsys.readouterr().err


def test_directory_instead_of_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path)])
    assert exc_info.value.code == 1
    assert 'Error: cannot read' in capsys.readouterr().err
