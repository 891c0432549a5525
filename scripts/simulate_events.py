from __future__ import annotations

import argparse
import json
import random
import time
from dataclasses import dataclass
from urllib import request

CAMERA_IDS = ("CAM-001", "CAM-002", "CAM-003", "CAM-004", "CAM-005")
ZONES = ("Lobby", "Corridor", "Perimeter", "Dock")
OBJECT_TYPES = ("Person", "Vehicle", "Animal")


@dataclass
class SimulationContext:
    """Runtime context for simulated event requests."""

    api_base: str
    rng: random.Random


def post_json(url: str, payload: dict) -> dict:
    data = json.dumps(payload).encode("utf-8")
    req = request.Request(
        url=url,
        data=data,
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    with request.urlopen(req, timeout=10) as resp:
        return json.loads(resp.read().decode("utf-8"))


def build_motion_event(rng: random.Random) -> dict:
    return {
        "cameraId": rng.choice(CAMERA_IDS),
        "zone": rng.choice(ZONES),
        "confidence": rng.randint(50, 100),
    }


def build_analytics_event(rng: random.Random) -> dict:
    return {
        "cameraId": rng.choice(CAMERA_IDS),
        "objectType": rng.choice(OBJECT_TYPES),
        "confidence": rng.randint(50, 100),
        "isRestrictedArea": rng.random() < 0.3,
        "boundingBox": {
            "x": rng.randint(0, 1600),
            "y": rng.randint(0, 900),
            "width": rng.randint(20, 300),
            "height": rng.randint(20, 300),
        },
    }


def build_health_event(rng: random.Random) -> dict:
    is_online = rng.random() < 0.8
    return {
        "cameraId": rng.choice(CAMERA_IDS),
        "isOnline": is_online,
        "errorMessage": None if is_online else "Stream timeout",
    }


EVENT_BUILDERS = {
    "motion": build_motion_event,
    "analytics": build_analytics_event,
    "health": build_health_event,
}


def send_event(context: SimulationContext, index: int, kind: str) -> None:
    payload = EVENT_BUILDERS[kind](context.rng)
    response = post_json(f"{context.api_base}/events/{kind}", payload)
    print(f"[EVENT {index}] {kind} {payload['cameraId']} -> {response['status']}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Send simulated camera events")
    parser.add_argument("--api-base", default="http://127.0.0.1:8000")
    parser.add_argument("--count", type=int, default=20)
    parser.add_argument("--rate", type=float, default=2.0, help="events per second")
    parser.add_argument(
        "--kinds",
        default="motion,analytics,health",
        help="Comma separated subset of motion, analytics, health",
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    kinds = [kind.strip() for kind in args.kinds.split(",") if kind.strip()]
    unknown = [kind for kind in kinds if kind not in EVENT_BUILDERS]
    if not kinds or unknown:
        raise SystemExit(f"unknown event kinds: {', '.join(unknown) or '(none)'}")

    context = SimulationContext(api_base=args.api_base, rng=random.Random(args.seed))
    dt = 1.0 / args.rate if args.rate > 0 else 0.5

    for idx in range(args.count):
        send_event(context, index=idx, kind=context.rng.choice(kinds))
        time.sleep(dt)

    print(f"[DONE] events={args.count}")
    print(f"Check cameras: {context.api_base}/cameras")


if __name__ == "__main__":
    main()
