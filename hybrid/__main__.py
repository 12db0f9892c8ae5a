"""CLI entry point for the Hybrid interpreter.

Usage:
    python -m hybrid [-v|-vv|-vvv|-vvvv]                 start the REPL
    python -m hybrid [-v...] [--print-result] <program_file>
    python -m hybrid [-v...] --emit-ast <program_file>
    python -m hybrid [-v...] --ast <ast_json_file>

Options:
  -v              Increase debug verbosity (can be repeated)
  --print-result  Print the rendered value of the last statement
  --emit-ast      Parse the given .hy file and emit an AST JSON file
  --ast           Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Without a program file the interactive
REPL is started; it evaluates each line as a complete program in one
shared global environment.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, ast_from_obj
from .environment import Environment, create_global_environment
from .errors import HybridError
from .interpreter import Interpreter
from .parser import Parser, parse
from .values import to_string

BANNER = "\nHybrid Repl v1.0.0"

HELP_TEXT = """\
Statements:
  let name = expression;     declare a variable (let name; declares null)
  const name = expression;   declare a constant
  name = expression          assign to an existing variable
Expressions:
  numbers, names, null, ( ), + - * / %
Constants: true, false
Type 'exit' or an empty line to quit."""


def repl(interpreter: Interpreter, env: Environment) -> None:
    parser = Parser()
    print(BANNER)
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line.strip() or "exit" in line:
            break
        if line.strip() == "help":
            print(HELP_TEXT)
            continue

        try:
            program = parser.produce_ast(line)
            result = interpreter.evaluate(program, env)
        except HybridError as e:
            print(str(e))
            continue
        print(to_string(result))


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Hybrid language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--print-result', action='store_true', help='print the value of the last statement')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='HYBRID_FILE', help='emit AST JSON for the given .hy file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Hybrid program file (.hy) to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            ast_program = parse(source)
        except HybridError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        try:
            text = json.dumps(ast_to_obj(ast_program), ensure_ascii=False, indent=2)
        except RecursionError:
            print(f"Error: {program_file} is nested too deeply to serialize", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            out.write(text)
        print(str(out_path))
        return

    if args.ast:
        ast_path = Path(args.ast)
        try:
            ast_program = ast_from_obj(json.loads(read_source(ast_path)))
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.program:
        source = read_source(Path(args.program))
        try:
            ast_program = parse(source)
        except HybridError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        with Interpreter(debug_level=args.v) as interpreter:
            repl(interpreter, create_global_environment())
        return

    with Interpreter(debug_level=args.v) as interpreter:
        try:
            result = interpreter.run(ast_program)
        except HybridError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    if args.print_result:
        print(to_string(result))


if __name__ == '__main__':
    main()
