"""
Manual smoke runner for CVR Django adapter endpoints.

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000 --authority ST1...
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


DEV_AUTHORITY = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
DEV_OWNER_A = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
DEV_OWNER_B = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"


def _call(
    *,
    method: str,
    url: str,
    caller: str | None = None,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    req_headers = {}
    if caller is not None:
        req_headers["X-Caller-Id"] = caller
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            status = response.status
            payload = json.loads(response.read().decode("utf-8"))
            return status, payload
    except error.HTTPError as exc:
        payload = json.loads(exc.read().decode("utf-8"))
        return exc.code, payload


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str, authority: str) -> None:
    api = base_url.rstrip("/") + "/v1/registry"

    status, payload = _call(
        method="POST",
        url=f"{api}/businesses/register",
        caller=DEV_OWNER_A,
        body={"name": "EcoRetail Store"},
    )
    _print_case("register-success", status, payload)
    business_id = payload.get("data", {}).get("business_id")

    status, payload = _call(
        method="POST",
        url=f"{api}/businesses/register",
        caller=DEV_OWNER_A,
        body={"name": "Second Store"},
    )
    _print_case("register-duplicate", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/businesses/register",
        caller=DEV_OWNER_B,
        body={"name": "Co-op"},
    )
    _print_case("register-second-owner", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/businesses/verify",
        caller=DEV_OWNER_A,
        body={"business_id": business_id, "score": 99},
    )
    _print_case("verify-unauthorized", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/businesses/verify",
        caller=authority,
        body={"business_id": business_id, "score": 85},
    )
    _print_case("verify-success", status, payload)

    status, payload = _call(
        method="GET",
        url=f"{api}/businesses/{business_id}/verified",
    )
    _print_case("read-verified", status, payload)

    status, payload = _call(
        method="GET",
        url=f"{api}/owners/{DEV_OWNER_A}/business",
    )
    _print_case("read-owner-business", status, payload)

    status, payload = _call(method="GET", url=f"{api}/snapshot")
    _print_case("read-snapshot", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    parser.add_argument(
        "--authority",
        default=DEV_AUTHORITY,
        help="Identity configured as CVR_REGISTRY_AUTHORITY on the server.",
    )
    args = parser.parse_args()
    run(args.base_url, args.authority)


if __name__ == "__main__":
    main()
