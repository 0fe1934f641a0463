"""Command-line interface for toonshade."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from toonshade.core.binding import JsonMaterialSurface, MaterialRenderer, get_slot_preset
from toonshade.core.color import Color
from toonshade.core.config import ShadeConfig, load_shade_config
from toonshade.core.errors import ToonShadeError
from toonshade.core.shading import ShadeParameters, ShadeResult, derive_shade_result
from toonshade.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def _param_overrides(args: argparse.Namespace) -> dict[str, int]:
    overrides = {
        "hue_shift_degrees": args.hue_shift,
        "saturation_delta": args.saturation,
        "value_delta": args.value,
    }
    return {k: v for k, v in overrides.items() if v is not None}


def build_shade_config(args: argparse.Namespace) -> ShadeConfig:
    """Merge an optional config file with command-line overrides.

    Raises:
        FileNotFoundError: If the config file does not exist
        ValidationError: If the merged config is invalid
    """
    config = load_shade_config(args.config) if getattr(args, "config", None) else ShadeConfig()

    updates: dict[str, object] = {}
    if args.color is not None:
        updates["base_color"] = Color.from_hex(args.color)
    overrides = _param_overrides(args)
    if overrides:
        params = config.params.model_dump() | overrides
        updates["params"] = ShadeParameters.model_validate(params)
    if getattr(args, "slots", None):
        updates["slots"] = get_slot_preset(args.slots)

    if not updates:
        return config
    return ShadeConfig.model_validate(config.model_dump() | updates)


def render_result_table(result: ShadeResult, slots: tuple[str, str, str]) -> Table:
    """Build a rich table with one row per palette entry."""
    table = Table(title="Shade colors")
    table.add_column("Slot", style="bold")
    table.add_column("Hex")
    table.add_column("Swatch")
    table.add_column("H (deg)", justify="right")
    table.add_column("S", justify="right")
    table.add_column("V", justify="right")

    for slot, color in zip(slots, result.as_tuple(), strict=True):
        hue, saturation, value = color.to_hsv()
        table.add_row(
            slot,
            color.to_hex(),
            f"[on {color.to_hex()}]      [/]",
            f"{hue * 360:.1f}",
            f"{saturation:.2f}",
            f"{value:.2f}",
        )
    return table


def result_to_dict(result: ShadeResult, slots: tuple[str, str, str]) -> dict[str, str]:
    return {slot: color.to_hex() for slot, color in zip(slots, result.as_tuple(), strict=True)}


def run_derive(args: argparse.Namespace) -> int:
    """Print the palette for a base color."""
    config = build_shade_config(args)
    result = derive_shade_result(config.base_color, config.params)
    slots = config.slots.as_tuple()

    if args.json:
        print(json.dumps(result_to_dict(result, slots), indent=2))
    else:
        console.print(render_result_table(result, slots))
    return 0


def run_apply(args: argparse.Namespace) -> int:
    """Derive the palette and write it into a JSON material file."""
    config = build_shade_config(args)

    material_path = Path(args.material)
    surface = JsonMaterialSurface(material_path).load()
    renderer = MaterialRenderer(name=surface.name, shared_material=surface)
    binding = config.to_binding(owner=surface.name, renderer=renderer)

    result = binding.set_colors()
    if result is None:
        console.print(f"[red]ERROR: Nothing to write for {surface.name}[/red]")
        return 1

    surface.save()
    console.print(render_result_table(result, config.slots.as_tuple()))
    console.print(f"[green]Material written:[/green] {material_path}")
    return 0


def _add_shade_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--color", help="Base color as #RRGGBB")
    parser.add_argument("--config", help="Path to shade config (.json, .yaml, .yml)")
    parser.add_argument("--hue-shift", type=int, help="Hue shift per step in degrees (0-360)")
    parser.add_argument("--saturation", type=int, help="Saturation decrease per step (0-100)")
    parser.add_argument("--value", type=int, help="Value decrease per step (0-100)")
    parser.add_argument("--slots", help="Slot name preset (default, uts)")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="toonshade",
        description="toonshade - toon shading palettes for materials",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    derive = sub.add_parser("derive", help="Print the shade palette for a base color")
    _add_shade_options(derive)
    derive.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    apply = sub.add_parser("apply", help="Write the shade palette into a JSON material")
    _add_shade_options(apply)
    apply.add_argument("--material", required=True, help="Path to material JSON file")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    handlers = {"derive": run_derive, "apply": run_apply}
    try:
        configure_logging(level=args.log_level)
        return handlers[args.cmd](args)
    except (ToonShadeError, ValidationError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
