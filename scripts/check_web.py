#!/usr/bin/env python3
"""Smoke-test the skill endpoint in a real uvicorn process.

Usage:
    python scripts/check_web.py
"""

from __future__ import annotations

import contextlib
import json
import os
import socket
import subprocess
import sys
import time
import urllib.request

_LAUNCH = {
    "version": "1.0",
    "session": {"new": True, "sessionId": "smoke", "attributes": {}},
    "request": {"type": "LaunchRequest", "requestId": "smoke-1"},
}


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _post_launch(base: str) -> dict[str, object]:
    request = urllib.request.Request(
        f"{base}/api/v1/skill",
        data=json.dumps(_LAUNCH).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    with urllib.request.urlopen(request, timeout=2) as resp:
        return json.loads(resp.read().decode("utf-8"))


def main() -> int:
    port = int(os.environ.get("PORT", str(free_port())))
    env = {**os.environ, "BIND": "127.0.0.1", "PORT": str(port), "CALCLEARN_SEED": "1"}
    proc = subprocess.Popen(
        [sys.executable, "-m", "calclearn.web.app"],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        env=env,
    )

    base = f"http://127.0.0.1:{port}"
    try:
        for _ in range(100):
            if proc.poll() is not None:
                break
            time.sleep(0.1)
            try:
                with urllib.request.urlopen(f"{base}/healthz", timeout=1) as resp:
                    if resp.status != 200:
                        continue
            except OSError:
                continue
            payload = _post_launch(base)
            speech = payload["response"]["outputSpeech"]["text"]  # type: ignore[index]
            print(f"launch -> {speech}")
            return 0
        output = proc.stdout.read() if proc.stdout else ""
        if output:
            sys.stderr.write(output[-2000:])
        return 2
    finally:
        proc.terminate()
        with contextlib.suppress(Exception):
            proc.wait(timeout=2)
        if proc.poll() is None:
            proc.kill()
            with contextlib.suppress(Exception):
                proc.wait(timeout=2)


if __name__ == "__main__":
    raise SystemExit(main())
