import importlib.util
import sys

def find_missing_modules(modules : list[str]) -> list[str]:
    return [ name for name in modules if importlib.util.find_spec(name) is None ]

def check_required_imports(modules : list[str], pip_extras : str|None = None) -> None:
    """Exit with installation instructions if any of the modules cannot be found"""
    missing_modules = find_missing_modules(modules)
    if not missing_modules:
        return

    target = f".[{pip_extras}]" if pip_extras else "."
    print(f"Error: subclean requires modules that are not installed: {', '.join(missing_modules)}", file=sys.stderr)
    print(f"Install the package and its dependencies with `pip install {target}`", file=sys.stderr)
    sys.exit(1)
