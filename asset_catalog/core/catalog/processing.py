"""
Out-of-band media extraction.

Extraction from the media library runs as a separate agent on the media
server; this service has no integration with it and only tells operators
how to start it.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MediaSource:
    """A library section the extraction agent can process."""
    name: str
    description: str


@dataclass(frozen=True)
class ProcessingInstruction:
    message: str
    command: str
    sources: tuple[MediaSource, ...] = field(default_factory=tuple)


PROCESSING_INSTRUCTION = ProcessingInstruction(
    message=(
        "Extract audio clips, dialogue, and sound effects from your Plex library. "
        "This requires running the local extraction agent on your server."
    ),
    command="python3 javari_media_parser.py --mode full",
    sources=(
        MediaSource(name="Movies", description="Extract scores & dialogue"),
        MediaSource(name="TV Shows", description="Process episodes"),
        MediaSource(name="Music", description="Extract stems & metadata"),
    ),
)
