"""
Moonlet Language Interpreter

This is the main entry point for the Moonlet language interpreter.

Workflow:
1. The source script is read from the file specified on the command line
   (or taken from ``-e``).
2. The Lexer tokenizes the source code into tokens.
3. The Parser processes tokens into a list of top-level nodes.
4. The Interpreter walks the nodes, calling builtins such as ``print``.

Set ``MOONLET_DEBUG`` in the environment to print the tokens and the parsed
tree before execution.
"""
import os
import sys

from moonletlang.exceptions import LexException, ParseException
from moonletlang.interpreter import Interpreter
from moonletlang.lexer import Lexer, format_tokens
from moonletlang.nodes import format_tree
from moonletlang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("Moonlet Language Interpreter")
    print()
    print("Usage:")
    print("    moonlet <script.moon>")
    print("    moonlet -e <source>")
    print()
    print("Arguments:")
    print("    <script.moon>")
    print("        Path to a Moonlet source file to execute.")
    print()
    print("Example:")
    print("    moonlet -e \"warn('Hello!', 'World!')\"")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -e <source>")
    print("        Execute the given source text.")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MOONLET_DEBUG")
    print("        When set, print tokens and the parsed tree before running.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(format_tokens(tokens))
    print("\nAST:\n")
    print(format_tree(ast))
    print(" ")


def run_source(code: str, script_name: str, interpreter: Interpreter | None = None) -> int:
    """
    Lex, parse and execute ``code``.

    Returns:
        int: 0 on success, 1 if the run aborted.
    """
    try:
        lexer = Lexer(code, script_name)
        tokens = lexer.tokens()
        parser = Parser(tokens, script_name, lexer.eof_token())
        ast = parser.parse()

        if os.environ.get('MOONLET_DEBUG'):
            debug_print_tokens_ast(tokens, ast)

        if interpreter is None:
            interpreter = Interpreter(script_name)
        interpreter.execute(ast)
    except Exception as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_script(script_name: str) -> int:
    """
    Run a Moonlet script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return run_source(code, script_name)


def is_incomplete(error: Exception) -> bool:
    """
    Return ``True`` if ``error`` means the input simply has not finished yet.
    """
    if isinstance(error, ParseException):
        return error.at_eof
    if isinstance(error, LexException):
        return error.reason in ("unfinished string", "unexpected end of string", "unfinished long comment")
    return False


def run_repl():
    """
    Run the interactive REPL
    """
    print("Moonlet Language Interpreter - REPL")
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
            source = "\n".join(buffer)
            try:
                lexer = Lexer(source, "<stdin>")
                parser = Parser(lexer.tokens(), "<stdin>", lexer.eof_token())
                ast = parser.parse()
                interpreter.execute(ast)
                buffer.clear()
            except (LexException, ParseException) as e:
                # Keep reading lines while the error is at the end of the input
                if is_incomplete(e):
                    continue
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
            except Exception as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - ``-e <source>``: run the given source text.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 2 and args[0] == '-e':
        return run_source(args[1], "<string>")
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
