"""
TierList — Command-line Renderer
Renders a tier list config (JSON) to a PNG file without starting the server.
Run: python scripts/render_tier_list.py config.json -o tier_list.png
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from tierlist.api.middleware.error_handler import ClientSafetyError, InternalRenderError
from tierlist.config import get_settings
from tierlist.core.pipeline import generate_tier_list_image
from tierlist.models.tier_list import TierListConfig
from tierlist.utils.logger import configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a tier list config to PNG.")
    parser.add_argument("config", type=Path, help="Path to a TierListConfig JSON file")
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("tier_list.png"),
        help="Output PNG path (default: tier_list.png)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        config = TierListConfig.model_validate(json.loads(args.config.read_text("utf-8")))
    except (OSError, json.JSONDecodeError) as e:
        print(f"  ✗ Could not read {args.config}: {e}")
        return 2
    except ValidationError as e:
        print(f"  ✗ Validation Error: {e}")
        return 2

    try:
        png = generate_tier_list_image(config)
    except ClientSafetyError as e:
        print(f"  ✗ {e}")
        return 1
    except InternalRenderError as e:
        print(f"  ✗ {e}")
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(png)
    print(f"  ✓ Wrote {len(png)} bytes to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
