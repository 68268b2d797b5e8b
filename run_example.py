"""
Working example: run the podcast pipeline directly, without the HTTP server.

Usage:
    python run_example.py "Révolution française" "Primary school children" [country]

Requires GROQ_API_KEY, PERPLEXITY_API_KEY and REPLICATE_API_TOKEN in .env.
"""
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

sys.path.insert(0, str(Path(__file__).parent))

from albert.client import apply_event
from albert.services.podcast.models import COUNTRIES
from albert.services.podcast import (
    Audience,
    EventType,
    PodcastOrchestrator,
    PodcastPackage,
    PodcastRequest,
)


async def run(request: PodcastRequest) -> PodcastPackage:
    orchestrator = PodcastOrchestrator()
    package = PodcastPackage()

    async for event in orchestrator.events(request):
        apply_event(package, event)
        print(f"[{event.type.value}] received")

        if event.type == EventType.EVENT_STATUS:
            print(f"  Status: {package.event_status.simplified_label.value}")
        elif event.type == EventType.PROMPTS:
            for item in package.questions:
                print(f"  - {item.question}")

    return package


def main():
    if len(sys.argv) < 3:
        print(__doc__)
        print("Audiences: " + ", ".join(a.value for a in Audience))
        print("Countries: " + ", ".join(COUNTRIES))
        sys.exit(1)

    request = PodcastRequest(
        topic=sys.argv[1],
        audience=sys.argv[2],
        country=sys.argv[3] if len(sys.argv) > 3 else "France",
    )

    print("=" * 60)
    print(f"Podcast: {request.topic}")
    print("=" * 60)

    package = asyncio.run(run(request))

    print("=" * 60)
    if package.error:
        print(f"FAILED: {package.error}")
    else:
        print("SCRIPT:")
        print(package.script)
        print("IMAGES:")
        for image in package.images:
            print(f"  {image.url}  <- {image.prompt[:60]}...")
    print("=" * 60)

    sys.exit(1 if package.error else 0)


if __name__ == "__main__":
    main()
