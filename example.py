#!/usr/bin/env python3
"""
Example usage of JSON Commons.

This script demonstrates how to use JSON Commons to turn a raw API
response into something presentable.
"""

import json
from json_commons import (
    deep_clone,
    equals,
    friendly_links,
    normalize_url,
    pick,
    prettify_string,
    replace_placeholders,
    unique,
)


def main():
    """Main example function."""
    print("JSON Commons Example")
    print("=" * 50)

    # Collection metadata as returned by the API
    collection = {
        "id": "SENTINEL2_L2A",
        "title": "Sentinel-2 L2A",
        "cube:dimensions": {
            "bands": {"type": "bands", "values": ["B02", "B03", "B04", "B08", "B04"]},
        },
        "summaries": {"eo:cloud_cover": [0, 100], "maxCloudCover": 80},
        "links": [
            {"href": "https://api.example.com/collections/SENTINEL2_L2A", "rel": "self"},
            {"href": "https://api.example.com/collections", "rel": "parent"},
            {"href": "https://www.example.org/licenses/copernicus/", "rel": "license"},
            {"href": "https://docs.example.org/sentinel-2/"},
            {"href": "https://api.example.com/collections/SENTINEL2_L1C", "rel": "derived_from"},
        ],
    }

    base_url = "https://api.example.com/v1.0/"
    print(f"Collection URL: {normalize_url(base_url, '/collections/' + collection['id'])}")

    print("\nOverview:")
    print(json.dumps(pick(collection, ["id", "title", "license"]), indent=2))

    bands = collection["cube:dimensions"]["bands"]["values"]
    print(f"\nBands: {', '.join(unique(bands))}")

    print("\nSummaries:")
    for key in collection["summaries"]:
        print(f"   {prettify_string(key)}")

    print("\nLinks:")
    for link in friendly_links(collection["links"]):
        print(f"   {link['title']}: {link['href']}")

    # Work on a copy before editing
    edited = deep_clone(collection)
    edited["title"] = "Sentinel-2 Level 2A"
    print(f"\nEdited copy differs from original: {not equals(edited, collection)}")

    message = replace_placeholders(
        "Collection '{id}' does not support the bands: {bands}",
        {"id": collection["id"], "bands": ["B01", "B09"]},
    )
    print(f"\nError message: {message}")


if __name__ == "__main__":
    main()
