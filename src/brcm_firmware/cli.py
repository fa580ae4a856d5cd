# src/brcm_firmware/cli.py

import argparse
import os
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ._version import get_version
from .device_config import DEFAULT_INF_NAME, INJECTOR_CHOICES, resolve_injector_variants
from .errors import InfNotFoundError
from .help_text import print_help
from .services import FirmwarePipeline


def _error_log_path() -> Path:
    override = os.getenv("BRCM_FIRMWARE_ERROR_LOG", "").strip()
    if override:
        return Path(override)

    for var in ("TEMP", "TMP"):
        value = os.getenv(var, "").strip()
        if value:
            return Path(value) / "brcm_firmware_error.log"
    return Path.cwd() / "brcm_firmware_error.log"


def _write_error_log(exc: BaseException) -> Optional[str]:
    path = _error_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass

    try:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        tb_text = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        with path.open("a", encoding="utf-8", newline="\n") as fh:
            fh.write(f"\n[{timestamp}] brcm-firmware error\n")
            fh.write(tb_text)
        return str(path)
    except OSError:
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brcm-firmware",
        description="Package Broadcom Bluetooth firmware for BrcmPatchRAM.",
        usage="%(prog)s [options] <input folder> <output folder>",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("folders", nargs="*", metavar="FOLDER")
    parser.add_argument("--inf", default=DEFAULT_INF_NAME, metavar="NAME")
    parser.add_argument(
        "--injectors", choices=sorted(INJECTOR_CHOICES), default="both", metavar="MODE"
    )
    parser.add_argument("--no-index", action="store_true")
    parser.add_argument("--print-manifest", action="store_true")
    parser.add_argument("-q", "--quiet", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        print_help()
        sys.exit(0)

    if args.version:
        print(get_version())
        sys.exit(0)

    if len(args.folders) != 2:
        parser.error("expected exactly two arguments: <input folder> <output folder>")

    input_dir, output_dir = args.folders
    pipeline = FirmwarePipeline(
        input_dir,
        output_dir,
        inf_name=args.inf,
        injector_variants=resolve_injector_variants(args.injectors),
        write_index=not args.no_index,
        quiet=args.quiet,
    )

    try:
        result = pipeline.run()
    except InfNotFoundError as e:
        print(
            f"Error: {pipeline.inf_name} not found in firmware input folder ({e.path}).",
            file=sys.stderr,
        )
        sys.exit(1)

    if not args.quiet:
        print(
            f"\nPackaged {len(result.packaged)} firmware file(s) "
            f"for {len(result.devices)} INF device(s) into {pipeline.output_dir}"
        )

    if args.print_manifest and result.manifest_path is not None:
        from .display import print_plist

        print_plist(result.manifest_path)


def run() -> None:
    exit_code = 0
    try:
        main()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        exit_code = 130
    except SystemExit as e:
        if isinstance(e.code, int):
            exit_code = e.code
        else:
            exit_code = 0 if e.code is None else 1
    except Exception as e:
        log_path = _write_error_log(e)
        print(f"\nAn unexpected error occurred: {e}", file=sys.stderr)
        if log_path:
            print(f"Full traceback saved to: {log_path}", file=sys.stderr)
        traceback.print_exc()
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
