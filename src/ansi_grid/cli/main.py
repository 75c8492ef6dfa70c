"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    try:
        from ansi_grid.cli.app import create_app
        app = create_app()
    except ImportError:
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Usage hint when typer is not installed."""
    args = sys.argv[1:]

    print("ansi-grid - grid layout toolkit for terminal UIs")
    print()
    print("Install CLI extras for the layout and demo commands:")
    print("  uv pip install ansi-grid[cli]")
    print()
    print("Basic usage (library mode):")
    print("  python -c \"from ansi_grid import GridTemplate; print(GridTemplate.parse('[a b]').labels)\"")

    if args and args[0] not in ("-h", "--help"):
        sys.exit(1)


if __name__ == "__main__":
    main()
