"""Generate sensitivity settings from the command line.

Usage:
    python -m src.run_generator generate [options]
    python -m src.run_generator presets
    python -m src.run_generator delete PRESET_ID

Examples:
    python -m src.run_generator generate --device "Galaxy S23" --playstyle rusher --ping low
    python -m src.run_generator generate --platform ios --screen-size 6.7 --save "Main"
    python -m src.run_generator delete preset_1718000000000_k3j9x0a1b
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from src.device_lookup.device_cache import DeviceCache
from src.device_lookup.lookup_service import DeviceLookupService, specs_to_form_fields
from src.logging_config import setup_logging
from src.preset_manager.preset_store import PresetStore
from src.sensitivity_engine import (
    InputValidationError,
    calculate_sensitivity,
    generate_explanation,
    parse_calculation_input,
)
from src.sensitivity_engine.config import (
    DEFAULT_ANDROID_DPI,
    DEFAULT_PING_LEVEL,
    DEFAULT_PLATFORM,
    DEFAULT_PLAYSTYLE,
    DEFAULT_REFRESH_RATE,
    DEFAULT_SCREEN_SIZE,
    VALID_PING_LEVELS,
    VALID_PLATFORMS,
    VALID_PLAYSTYLES,
)
from src.sensitivity_engine.explanation import SUMMARY_LINES

logger = logging.getLogger(__name__)

DEFAULT_DEVICE_NAME = "Unknown Device"


def _default_form() -> Dict:
    return {
        "platform": DEFAULT_PLATFORM,
        "playstyle": DEFAULT_PLAYSTYLE,
        "pingLevel": DEFAULT_PING_LEVEL,
        "screenSize": str(DEFAULT_SCREEN_SIZE),
        "refreshRate": str(DEFAULT_REFRESH_RATE),
        "dpi": str(DEFAULT_ANDROID_DPI),
        "useCustomDpi": False,
    }


def build_form(args: argparse.Namespace, lookup_service: Optional[DeviceLookupService]) -> Dict:
    """Merge form defaults, looked-up device specs and explicit options."""
    form = _default_form()
    device_default_dpi = None

    if args.device and lookup_service is not None:
        result = lookup_service.lookup(args.device)
        if result.success:
            prefill = specs_to_form_fields(result.device)
            form.update(prefill)
            device_default_dpi = prefill["dpi"]
            print(f"Device: {args.device} ({result.source}) - "
                  f"{result.device.platform}, {prefill['screenSize']}\", "
                  f"{prefill['refreshRate']}Hz, {prefill['dpi']} DPI")
        else:
            print(result.error)

    overrides = {
        "platform": args.platform,
        "playstyle": args.playstyle,
        "pingLevel": args.ping,
        "screenSize": args.screen_size,
        "refreshRate": args.refresh_rate,
        "dpi": args.dpi,
    }
    form.update({k: v for k, v in overrides.items() if v is not None})

    if args.custom_dpi:
        form["useCustomDpi"] = True
    elif args.dpi is not None and device_default_dpi is not None:
        form["useCustomDpi"] = str(args.dpi) != device_default_dpi

    return form


def _print_result(result) -> None:
    for attr, label, _ in SUMMARY_LINES:
        print(f"{label:<10} {getattr(result, attr):>3}")


def cmd_generate(args: argparse.Namespace) -> int:
    lookup_service = None
    if args.device:
        lookup_service = DeviceLookupService(cache=DeviceCache(), use_ai=not args.offline)

    form = build_form(args, lookup_service)
    try:
        calc_input = parse_calculation_input(form)
    except InputValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    result = calculate_sensitivity(calc_input)
    _print_result(result)

    if not args.no_explain:
        print()
        print(generate_explanation(calc_input, result))

    if args.save:
        preset = PresetStore().create_preset(
            name=args.save,
            device=args.device or DEFAULT_DEVICE_NAME,
            platform=calc_input.platform,
            playstyle=calc_input.playstyle,
            ping=calc_input.ping_level,
            dpi=calc_input.dpi,
            sensitivities=result,
        )
        print(f"\nSaved preset {preset.id}")

    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    presets = PresetStore().list_presets()
    if not presets:
        print("No saved presets yet.")
        return 0

    for preset in presets:
        s = preset.sensitivities
        dpi = f", {preset.dpi} DPI" if preset.dpi else ""
        print(f"{preset.id}  {preset.name} - {preset.device} "
              f"({preset.platform}, {preset.playstyle}, {preset.ping} ping{dpi})")
        print("    " + " / ".join(str(v) for v in s.as_channels().values()))
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    if PresetStore().delete_preset(args.preset_id):
        print(f"Deleted preset {args.preset_id}")
        return 0
    print(f"Preset not found: {args.preset_id}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.run_generator",
        description="Touch sensitivity generator",
    )
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Calculate sensitivities")
    gen.add_argument("--device", help="Device name to look up")
    gen.add_argument("--offline", action="store_true", help="Skip the AI device lookup")
    gen.add_argument("--platform", choices=VALID_PLATFORMS)
    gen.add_argument("--playstyle", choices=VALID_PLAYSTYLES)
    gen.add_argument("--ping", choices=VALID_PING_LEVELS)
    gen.add_argument("--screen-size", help="Screen size in inches")
    gen.add_argument("--refresh-rate", help="Refresh rate in Hz")
    gen.add_argument("--dpi", help="Android DPI")
    gen.add_argument("--custom-dpi", action="store_true", help="Mark the DPI as user-changed")
    gen.add_argument("--save", metavar="NAME", help="Save the result as a preset")
    gen.add_argument("--no-explain", action="store_true")
    gen.set_defaults(func=cmd_generate)

    presets = sub.add_parser("presets", help="List saved presets")
    presets.set_defaults(func=cmd_presets)

    delete = sub.add_parser("delete", help="Delete a saved preset")
    delete.add_argument("preset_id")
    delete.set_defaults(func=cmd_delete)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        return args.func(args)
    except Exception:
        logger.exception("Command %s failed", args.command)
        return 1


if __name__ == "__main__":
    sys.exit(main())
