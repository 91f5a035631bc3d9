import sys
import traceback

from errors import ParsnipError
from interpreter import Interpreter
from lexer import Lexer
from parser import Parser


# Simple AST printer (so you can SEE what the parser built)
def ast_to_dict(node):
    if node is None:
        return None

    t = node.__class__.__name__
    d = {"type": t}

    if t == "Program":
        d["name"] = node.name
        d["block"] = ast_to_dict(node.block)
    elif t == "Block":
        d["declarations"] = [ast_to_dict(decl) for decl in node.declarations]
        d["compound_statement"] = ast_to_dict(node.compound_statement)
    elif t == "VarDecl":
        d["name"] = node.var_node.name
        d["var_type"] = node.type_node.name
    elif t == "Compound":
        d["children"] = [ast_to_dict(c) for c in node.children]
    elif t == "Assign":
        d["name"] = node.left.name
        d["value"] = ast_to_dict(node.right)
    elif t == "BinOp":
        d["op"] = node.op
        d["left"] = ast_to_dict(node.left)
        d["right"] = ast_to_dict(node.right)
    elif t == "UnaryOp":
        d["op"] = node.op
        d["expr"] = ast_to_dict(node.expr)
    elif t == "Num":
        d["value"] = repr(node.value)
    elif t == "Var":
        d["name"] = node.name
    elif t == "NoOp":
        pass
    else:
        d["raw"] = str(node)

    return d


def pretty(obj, indent=0):
    sp = "  " * indent
    if isinstance(obj, dict):
        lines = []
        for k, v in obj.items():
            if isinstance(v, (dict, list)):
                lines.append(f"{sp}{k}:")
                lines.append(pretty(v, indent + 1))
            else:
                lines.append(f"{sp}{k}: {v}")
        return "\n".join(lines)
    if isinstance(obj, list):
        lines = []
        for item in obj:
            lines.append(f"{sp}-")
            lines.append(pretty(item, indent + 1))
        return "\n".join(lines)
    return f"{sp}{obj}"


def format_environment(interpreter):
    return [f"{name} = {interpreter.environment[name]}" for name in sorted(interpreter.environment)]


def report(e, debug):
    if debug:
        traceback.print_exc()
    else:
        print(str(e))


def cmd_parse(path, debug: bool = False):
    try:
        with open(path, "r", encoding="utf-8") as f:
            code = f.read()

        lexer = Lexer(code)
        parser = Parser(lexer)
        tree = parser.parse()
    except OSError as e:
        print(f"cannot read file: {path} ({e.strerror})")
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"cannot read file: {path} (not valid UTF-8)")
        sys.exit(1)
    except ParsnipError as e:
        report(e, debug)
        sys.exit(1)

    try:
        dump = pretty(ast_to_dict(tree))
    except RecursionError:
        print("Parse error: expression nested too deeply to print")
        sys.exit(1)
    print(dump)


def cmd_run(path, debug: bool = False, trace: bool = False):
    try:
        with open(path, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"cannot read file: {path} ({e.strerror})")
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"cannot read file: {path} (not valid UTF-8)")
        sys.exit(1)

    interpreter = Interpreter(trace=trace)
    try:
        interpreter.reset(Parser(Lexer(code)))
        interpreter.interpret()
    except ParsnipError as e:
        report(e, debug)
        sys.exit(1)

    for line in format_environment(interpreter):
        print(line)


def cmd_repl(debug: bool = False, trace: bool = False):
    # One interpreter for the whole session so assignments persist between lines.
    interpreter = Interpreter(trace=trace)

    while True:
        try:
            line = input("calc> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        stripped = line.strip()
        if stripped == "exit":
            break
        if not stripped:
            continue

        try:
            interpreter.reset(Parser(Lexer(stripped)))
            result = interpreter.interpret()
        except ParsnipError as e:
            report(e, debug)
            continue

        print(result)


def usage():
    print("Usage:")
    print("  python cli.py run <file.pas>")
    print("  python cli.py parse <file.pas>")
    print("  python cli.py repl")
    print("  (optional) --debug to show Python traceback")
    print("  (optional) --trace to print each evaluation step")
    sys.exit(1)


def main():
    debug = False
    if "--debug" in sys.argv:
        debug = True
        sys.argv.remove("--debug")

    trace = False
    if "--trace" in sys.argv:
        trace = True
        sys.argv.remove("--trace")

    if len(sys.argv) < 2:
        usage()

    cmd = sys.argv[1]

    if cmd == "repl":
        if len(sys.argv) != 2:
            usage()
        cmd_repl(debug=debug, trace=trace)
        return

    if len(sys.argv) != 3:
        usage()

    path = sys.argv[2]

    if cmd == "parse":
        cmd_parse(path, debug=debug)
    elif cmd == "run":
        cmd_run(path, debug=debug, trace=trace)
    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
