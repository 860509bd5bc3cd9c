from __future__ import annotations

import argparse
import json
import sys

from gyazo_client.client import GyazoClient
from gyazo_client.config import GyazoClientOptions
from gyazo_client.errors import GyazoError
from gyazo_client.upload import UploadParamsBuilder
from gyazo_client.utils.json_safe import to_jsonable


def _print_json(obj: object) -> None:
    """Print JSON to stdout."""
    print(json.dumps(to_jsonable(obj), indent=2, sort_keys=True))


def _client(args: argparse.Namespace) -> GyazoClient:
    return GyazoClient(
        GyazoClientOptions(
            access_token=args.access_token,
            base_url=args.base_url,
            upload_url=args.upload_url,
            timeout=args.timeout,
        )
    )


def cmd_get(args: argparse.Namespace) -> int:
    """Call GET /api/images/{id}."""
    _print_json(_client(args).get_image(args.image_id))
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Call GET /api/images."""
    _print_json(_client(args).list_images())
    return 0


def cmd_upload(args: argparse.Namespace) -> int:
    """Upload a local image file to POST /api/upload.

    Security notes:
    - The whole file is read into memory; the server enforces size limits.

    """
    with open(args.file, "rb") as f:
        builder = UploadParamsBuilder(f.read())

    if args.access_policy is not None:
        builder.access_policy(args.access_policy)
    if args.metadata_is_public is not None:
        builder.metadata_is_public(args.metadata_is_public)
    for name in ("referer_url", "app", "title", "desc", "created_at", "collection_id"):
        value = getattr(args, name)
        if value is not None:
            getattr(builder, name)(value)

    _print_json(_client(args).upload_image(builder.build()))
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    """Call DELETE /api/images/{id}."""
    _print_json(_client(args).delete_image(args.image_id))
    return 0


def cmd_oembed(args: argparse.Namespace) -> int:
    """Call GET /api/oembed for a https://gyazo.com/ URL."""
    _print_json(_client(args).get_oembed(args.url))
    return 0


def run_client_command(args: argparse.Namespace) -> int:
    """Run the selected command, turning client failures into exit code 2."""

    if not args.access_token:
        print(
            "error: an access token is required (--access-token or GYAZO_ACCESS_TOKEN)",
            file=sys.stderr,
        )
        return 2
    try:
        return int(args.func(args))
    except (GyazoError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


def register_client_commands(sub: argparse._SubParsersAction) -> None:
    """Register the five API commands."""

    g = sub.add_parser("get", help="Show one image")
    g.add_argument("image_id", help="Image id")
    g.set_defaults(func=cmd_get)

    ls = sub.add_parser("list", help="List your images")
    ls.set_defaults(func=cmd_list)

    up = sub.add_parser("upload", help="Upload an image file")
    up.add_argument("file", help="Path to local image file")
    up.add_argument(
        "--access-policy", default=None, choices=["anyone", "only_me"], help="Who can view the image"
    )
    up.add_argument(
        "--metadata-is-public",
        default=None,
        choices=["true", "false"],
        help="Whether metadata (app, title, url, desc) is public",
    )
    up.add_argument("--referer-url", default=None, help="Source page URL")
    up.add_argument("--app", default=None, help="Application name")
    up.add_argument("--title", default=None, help="Image title")
    up.add_argument("--desc", default=None, help="Image description")
    up.add_argument("--created-at", default=None, help="Creation time (unix seconds)")
    up.add_argument("--collection-id", default=None, help="Target collection id")
    up.set_defaults(func=cmd_upload)

    d = sub.add_parser("delete", help="Delete an image")
    d.add_argument("image_id", help="Image id")
    d.set_defaults(func=cmd_delete)

    oe = sub.add_parser("oembed", help="Show oEmbed data for a gyazo.com URL")
    oe.add_argument("url", help="Image page URL (https://gyazo.com/...)")
    oe.set_defaults(func=cmd_oembed)
