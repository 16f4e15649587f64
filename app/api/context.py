"""Request metadata injected ahead of every pipeline."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request

UNKNOWN_IP = "unknown"


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Read-only view of an incoming request."""

    method: str
    url: str
    body: Any = None
    cookies: Mapping[str, str] = field(default_factory=dict)
    client_ip: str = UNKNOWN_IP
    tag: str = ""


def extract_client_ip(request: Request) -> str:
    """Return the caller's IP: first X-Forwarded-For hop, X-Real-IP, or the peer."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_IP


async def read_body(request: Request) -> Any:
    """Decode a JSON body. Empty gives None; undecodable or too deep gives the raw text."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        return raw.decode("utf-8", errors="replace")


async def build_request_context(request: Request, tag: str = "") -> RequestContext:
    body = await read_body(request) if request.method not in ("GET", "HEAD") else None
    return RequestContext(
        method=request.method,
        url=str(request.url.path) + (f"?{request.url.query}" if request.url.query else ""),
        body=body,
        cookies=dict(request.cookies),
        client_ip=extract_client_ip(request),
        tag=tag,
    )
