"""
bwlang Interpreter

This is the main entry point for the bwlang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.
5. Any error is rendered with the offending line and a caret under it.

With no script the interpreter starts a REPL. Bare expressions typed at the
prompt echo their value; lines that leave a construct open are buffered until
it is complete.
"""
import sys

from bwlang.diagnostics import format_error
from bwlang.exceptions import BwlError, UnexpectedEndOfInputError
from bwlang.interpreter import Interpreter
from bwlang.source import Source


def print_usage():
    """
    Print usage.
    """
    print()
    print("bwlang Interpreter")
    print()
    print("Usage:")
    print("    bwl <script.bwl>")
    print()
    print("Arguments:")
    print("    <script.bwl>")
    print("        Path to a bwlang source file to execute.")
    print()
    print("Example:")
    print("    bwl hello.bwl")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    BWLDEBUG=1")
    print("        Print the tokens and AST of every unit before running it.")


def run_script(script_name: str) -> int:
    """
    Run a bwlang script. Returns the process exit code.
    """
    try:
        source = Source.from_file(script_name)
    except OSError as e:
        print(f"Failed to read file '{script_name}': {e.strerror}", file=sys.stderr)
        return 1

    interpreter = Interpreter(source.label)
    try:
        interpreter.interpret(source.content)
    except BwlError as e:
        print(format_error(source, e), file=sys.stderr)
        return 65 if e.stage in ("lex", "parse") else 70
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("bwlang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = Source.from_string("\n".join(buffer), "<stdin>")
            try:
                result = interpreter.interpret(source.content)
                if result is not None:
                    print(result)
                buffer.clear()
            except UnexpectedEndOfInputError:
                # The input is incomplete; keep reading lines
                continue
            except BwlError as e:
                print(format_error(source, e))
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli() -> None:
    """
    Console-script wrapper around :func:`main`.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
