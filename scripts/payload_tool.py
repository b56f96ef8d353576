# scripts/payload_tool.py
import argparse
import sys
from typing import List, Optional

from securepayload import PayloadError, decrypt_payload, encrypt_payload
from securepayload.config import parse_key_hex, select_key
from securepayload.log import LogDest, level_from_env, setup_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Encrypt or decrypt device payloads")
    p.add_argument("op", choices=["encrypt", "decrypt"])
    p.add_argument("--in", dest="in_text", help="input text; stdin when omitted")
    p.add_argument("--key", help="AES-128 key as 32 hex chars; configuration when omitted")
    p.add_argument("--env", dest="env_path", help=".env file holding FA_LOCAL_KEY / FA_CLOUD_KEY")
    p.add_argument("--syslog", action="store_true", help="also log to syslog")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    dest = LogDest.CONSOLE | (LogDest.SYSLOG if args.syslog else 0)
    setup_logging(level_from_env(), dest)

    text = args.in_text if args.in_text is not None else sys.stdin.read().rstrip("\n")
    try:
        key = parse_key_hex(args.key) if args.key else select_key(args.env_path)
        if args.op == "encrypt":
            print(encrypt_payload(text, key))
        else:
            print(decrypt_payload(text, key).decode("utf-8", errors="replace"))
    except PayloadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
