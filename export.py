import argparse
import ast
import os

# Arena limit for a single submitted source file
MAX_CHARS = 100000

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Dependency order: every module only uses names defined above it
MODULES = [
    "config.py",
    "pilot/geometry.py",
    "pilot/actions.py",
    "pilot/pod.py",
    "pilot/kinematics.py",
    "pilot/race.py",
    "pilot/strategies/base.py",
    "pilot/strategies/fly.py",
    "pilot/strategies/block.py",
    "pilot/strategies/legacy.py",
    "pilot/strategies/registry.py",
    "pilot/protocol.py",
    "bot.py",
]

LOCAL_PACKAGES = ("config", "pilot", "bot")

ENTRY_POINT = """
if __name__ == "__main__":
    main()
"""

def _is_local(module):
    return module is not None and module.split(".")[0] in LOCAL_PACKAGES

def _is_main_guard(node):
    if not isinstance(node, ast.If):
        return False
    test = node.test
    return (isinstance(test, ast.Compare)
            and isinstance(test.left, ast.Name)
            and test.left.id == "__name__")

def strip_module(source):
    """
    Removes project-local imports and the __main__ guard from one module,
    using ast line spans so multi-line imports go too.
    """
    tree = ast.parse(source)
    drop = set()
    for node in tree.body:
        if isinstance(node, ast.ImportFrom) and _is_local(node.module):
            drop.update(range(node.lineno, node.end_lineno + 1))
        elif isinstance(node, ast.Import) and any(_is_local(a.name) for a in node.names):
            drop.update(range(node.lineno, node.end_lineno + 1))
        elif _is_main_guard(node):
            drop.update(range(node.lineno, node.end_lineno + 1))

    lines = source.splitlines()
    kept = [line for i, line in enumerate(lines, start=1) if i not in drop]
    return "\n".join(kept).strip() + "\n"

def build_script(root=PROJECT_ROOT):
    parts = []
    for rel_path in MODULES:
        with open(os.path.join(root, rel_path), 'r') as f:
            source = f.read()
        parts.append(f"# ---- {rel_path}\n" + strip_module(source))
    return "\n\n".join(parts) + ENTRY_POINT

def export_bot(output_path="submission.py", root=PROJECT_ROOT):
    script = build_script(root)
    if len(script) > MAX_CHARS:
        raise ValueError(f"Submission is {len(script)} chars, arena limit is {MAX_CHARS}")

    with open(output_path, 'w') as f:
        f.write(script)

    print(f"Exported to {output_path} ({len(script)} chars, {len(MODULES)} modules)")
    return output_path

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--out", type=str, default="submission.py")
    args = parser.parse_args()

    export_bot(args.out)

if __name__ == "__main__":
    main()
