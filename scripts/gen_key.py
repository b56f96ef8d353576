# scripts/gen_key.py
import argparse
import os
from typing import List, Optional

from dotenv import set_key

from securepayload.config import FA_CLOUD_KEY, FA_LOCAL_KEY
from securepayload.util import uuid4_key, uuid4_string

ENV_NAMES = {"local": FA_LOCAL_KEY, "cloud": FA_CLOUD_KEY}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate a 128-bit payload key")
    p.add_argument("role", choices=sorted(ENV_NAMES), help="which key slot to fill")
    p.add_argument("--env", dest="env_path", help="write the key into this .env file instead of printing it")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    key_hex = uuid4_string(uuid4_key())
    name = ENV_NAMES[args.role]

    if args.env_path:
        env_dir = os.path.dirname(args.env_path)
        if env_dir:
            os.makedirs(env_dir, exist_ok=True)
        if not os.path.exists(args.env_path):
            with open(args.env_path, "w", encoding="utf-8") as f:
                f.write("")
        set_key(args.env_path, name, key_hex, quote_mode="never")
        print(f"{name} written to {args.env_path}")
    else:
        print(f"{name}={key_hex}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
