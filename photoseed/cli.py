"""CLI for photoseed."""

from __future__ import annotations

import logging
import sys

import click

from photoseed import __version__
from photoseed.config import get_settings
from photoseed.errors import PhotoSeedError


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """📷 photoseed — a PRNG seed from a single camera frame."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _image_path(seed_file: str | None) -> str:
    return f"{seed_file or get_settings().seed_file}.png"


def _count_option(f):
    return click.option(
        "--count",
        default=None,
        type=click.IntRange(min=0),
        help="Demo draws to print (default from PHOTOSEED_SAMPLE_COUNT).",
    )(f)


def _report(seed: bytes, count: int | None) -> None:
    from photoseed.numpy_compat import sample, seed_number

    draws = sample(seed, get_settings().sample_count if count is None else count)
    click.echo(f"seed: {seed.hex()}")
    click.echo(f"seed number: {seed_number(seed)}")
    click.echo(f"random numbers: {draws['numbers']}")
    click.echo(f"random bools: {draws['bools']}")


def _fail(e: Exception) -> None:
    click.echo(f"Error ({type(e).__name__}): {e}", err=True)
    sys.exit(1)


# ────────────────────────────────────────────────────────────
# Seeding
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("seed_file", required=False)
@click.option("--device", type=int, default=None, help="Camera index (default from config).")
@click.option("--timeout", type=float, default=None, help="Seconds to wait for a frame.")
@click.option("--warmup", type=int, default=None, help="Frames to discard before capturing.")
@_count_option
def save(
    seed_file: str | None,
    device: int | None,
    timeout: float | None,
    warmup: int | None,
    count: int | None,
) -> None:
    """Capture a frame, store it as SEED_FILE.png and print its seed."""
    from photoseed.acquirers import CameraAcquirer, save_frame
    from photoseed.conditioning import derive_seed

    path = _image_path(seed_file)
    try:
        with CameraAcquirer(device_index=device, timeout=timeout, warmup_frames=warmup) as cam:
            frame = cam.acquire_frame()
        seed = derive_seed(frame)
        save_frame(frame, path)
    except (PhotoSeedError, OSError) as e:
        _fail(e)
        return

    click.echo(f"image: {path}")
    _report(seed, count)


@main.command()
@click.argument("seed_file", required=False)
@_count_option
def load(seed_file: str | None, count: int | None) -> None:
    """Load SEED_FILE.png and print the seed it derives."""
    from photoseed.acquirers import ImageFileAcquirer
    from photoseed.conditioning import derive_seed

    try:
        with ImageFileAcquirer(_image_path(seed_file)) as acq:
            seed = derive_seed(acq.acquire_frame())
    except PhotoSeedError as e:
        _fail(e)
        return

    _report(seed, count)


# ────────────────────────────────────────────────────────────
# Diagnostics
# ────────────────────────────────────────────────────────────


@main.command()
def scan() -> None:
    """List frame acquirers available on this machine."""
    from photoseed.platform import detect_available_acquirers, platform_info

    info = platform_info()
    click.echo(f"Platform: {info['system']} {info['machine']} (Python {info['python']})")
    click.echo()

    acquirers = detect_available_acquirers()
    click.echo(f"Found {len(acquirers)} available acquirer(s):\n")
    for acq in acquirers:
        click.echo(f"  ✅ {acq.name:<15} {acq.description}")
    if not acquirers:
        click.echo("  (none found)")


@main.command()
@click.argument("seed_file", required=False)
@click.option("--trials", default=256, type=click.IntRange(min=1), help="Perturbations to try.")
def avalanche(seed_file: str | None, trials: int) -> None:
    """Measure seed bit-flip rate under single-byte changes to SEED_FILE.png."""
    from photoseed.acquirers import ImageFileAcquirer
    from photoseed.stats import avalanche_profile

    try:
        with ImageFileAcquirer(_image_path(seed_file)) as acq:
            profile = avalanche_profile(acq.acquire_frame(), trials=trials)
    except PhotoSeedError as e:
        _fail(e)
        return

    click.echo(f"Trials:       {profile['trials']}")
    click.echo(f"Mean flipped: {profile['mean']:.2%}")
    click.echo(f"Min flipped:  {profile['min']:.2%}")
    click.echo(f"Max flipped:  {profile['max']:.2%}")


if __name__ == "__main__":
    main()
