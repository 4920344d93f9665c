import argparse
import json
import sys
from typing import Any

from file_editor.container import container
from file_editor.use_cases.tools.tool_call import call_tool


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-editor-tools",
        description="Invoke one file editor tool and print its JSON result.",
    )
    parser.add_argument("tool", nargs="?", help="Tool name (see --list)")
    parser.add_argument(
        "--args",
        default="{}",
        help='Tool arguments as a JSON object, e.g. \'{"path": "/tmp/a.txt"}\'',
    )
    parser.add_argument("--list", action="store_true", help="List available tools")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (JSON) with colors",
    )

    args = parser.parse_args(argv)
    handler = container.get_files_tools_handler()

    if args.list:
        for spec in handler.available_tools():
            print(f"{spec['name']}: {spec['description']}")
        return 0

    if not args.tool:
        parser.error("a tool name is required unless --list is given")

    try:
        arguments: Any = json.loads(args.args)
    except json.JSONDecodeError as e:
        print(f"Error: --args is not valid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(arguments, dict):
        print("Error: --args must be a JSON object", file=sys.stderr)
        return 2

    result = call_tool(handler, args.tool, arguments)
    if args.pretty:
        from rich import box
        from rich.console import Console
        from rich.panel import Panel
        from rich.syntax import Syntax

        console = Console(soft_wrap=True)
        if result.is_error:
            console.print(
                Panel(result.text, title=args.tool, box=box.ROUNDED, border_style="red")
            )
        else:
            console.print(
                Panel(
                    Syntax(result.text, "json"),
                    title=args.tool,
                    box=box.ROUNDED,
                    border_style="magenta",
                    expand=True,
                )
            )
    else:
        print(result.text, file=sys.stderr if result.is_error else sys.stdout)
    return 1 if result.is_error else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
