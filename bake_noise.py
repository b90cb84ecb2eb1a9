# bake_noise.py

"""
================================================================================
OFFLINE NOISE BAKER SCRIPT
================================================================================
This script is a command-line tool for pre-rendering a noise field to a
directory of tile images ("baking"). Texture and terrain tools can then load
the tiles instead of evaluating the noise at runtime.

Usage:
    python bake_noise.py --config path/to/your/config.json [--output DIR]

Config layout:
    {
        "noise_parameters": {"noise_type": "cellular", "seed": 42, ...},
        "output": {"tiles_x": 4, "tiles_y": 4, "tile_resolution": 64,
                   "tile_size": 4.0, "palette": "grayscale", "workers": 0}
    }
================================================================================
"""
import os
import sys
import json
import logging
import argparse
import time
import hashlib
import collections
import multiprocessing

import numpy as np
from PIL import Image
from tqdm import tqdm

from noise_generator.generator import NoiseGenerator
from noise_generator import color_maps
from noise_generator import config as DEFAULTS

# --- Helper for Tiered Tile Compression ---
def save_tile_image(color_array: np.ndarray, directory: str, file_hash: str) -> str:
    """
    Saves a tile using a tiered, lossless compression strategy with Pillow.
    Returns the tier used: 'uniform', 'palettized' or 'full'.
    """
    os.makedirs(directory, exist_ok=True)
    file_path = os.path.join(directory, f"{file_hash}.png")

    # Tier 1: Perfectly uniform color (blocky noise often produces these).
    if (color_array == color_array[0, 0]).all():
        uniform_color = tuple(int(c) for c in color_array[0, 0])
        Image.new('RGB', (1, 1), uniform_color).save(file_path, 'PNG')
        return 'uniform'

    img = Image.fromarray(color_array)

    # Tier 2: Low color count, convert to palettized mode.
    colors = img.getcolors(256)
    if colors:
        img.quantize(colors=256).save(file_path, 'PNG')
        return 'palettized'

    # Tier 3: Fallback for high-color tiles.
    img.save(file_path, 'PNG')
    return 'full'

# --- Global variables for worker processes ---
worker_generator = None
worker_lut = None
worker_tile_dir = ""
worker_tile_res = 0
worker_tile_size = 0.0

def init_worker(noise_params, lut, tile_dir, tile_res, tile_size):
    """Initializes the global state for each worker process."""
    global worker_generator, worker_lut, worker_tile_dir, worker_tile_res, worker_tile_size

    worker_logger = logging.getLogger(f"Worker-{os.getpid()}")
    worker_generator = NoiseGenerator(config=noise_params, logger=worker_logger)
    worker_lut = lut
    worker_tile_dir = tile_dir
    worker_tile_res = tile_res
    worker_tile_size = tile_size

def process_tile(coords):
    """
    Renders and SAVES a single tile. Returns only minimal metadata.
    """
    tx, ty = coords
    values = worker_generator.sample_region(
        tx * worker_tile_size, ty * worker_tile_size, worker_tile_size, worker_tile_res
    )
    color_array = color_maps.get_color_array(values, worker_lut)

    file_hash = hashlib.md5(color_array.tobytes()).hexdigest()
    compression_type = save_tile_image(color_array, worker_tile_dir, file_hash)
    return {'tx': tx, 'ty': ty, 'hash': file_hash, 'compression_type': compression_type}

def load_config(config_path: str, logger: logging.Logger):
    logger.info(f"Loading configuration from: {config_path}")
    try:
        with open(config_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.critical(f"Failed to load or parse config file: {e}")
        return None

# --- Main Baking Function ---
def bake_noise(config_path: str, output_dir: str = None, logger: logging.Logger = None):
    """
    Loads a configuration, renders all noise tiles, and saves them as PNG
    images plus a manifest.json to the output directory.

    Returns the manifest path, or None if the configuration could not be loaded.
    """
    logger = logger or logging.getLogger("Baker")

    config = load_config(config_path, logger)
    if config is None:
        return None

    noise_params = config.get('noise_parameters', {})
    output = config.get('output', {})

    # Validates the parameters before any worker is started.
    main_generator = NoiseGenerator(config=noise_params, logger=logger)

    tiles_x = int(output.get('tiles_x', DEFAULTS.DEFAULT_TILES_X))
    tiles_y = int(output.get('tiles_y', DEFAULTS.DEFAULT_TILES_Y))
    tile_res = int(output.get('tile_resolution', DEFAULTS.DEFAULT_TILE_RESOLUTION))
    tile_size = float(output.get('tile_size', DEFAULTS.DEFAULT_TILE_SIZE))
    palette = output.get('palette', DEFAULTS.DEFAULT_PALETTE)
    num_workers = int(output.get('workers', 0)) or max(1, multiprocessing.cpu_count() - 1)

    base_output_dir = output_dir or output.get('output_dir') or os.path.join(
        DEFAULTS.DEFAULT_OUTPUT_DIR, f"{main_generator.noise_type}_seed_{main_generator.seed}")
    tile_dir = os.path.join(base_output_dir, "tiles")

    logger.info(f"Building '{palette}' color lookup table...")
    lut = color_maps.create_lut(palette)

    total_tiles = tiles_x * tiles_y
    tasks = [(tx, ty) for ty in range(tiles_y) for tx in range(tiles_x)]
    tile_map = np.empty((tiles_y, tiles_x), dtype=object)
    saved_hashes = set()
    compression_stats = collections.Counter()

    logger.info(f"Starting bake for a {tiles_x}x{tiles_y} tile grid ({total_tiles} tiles) with {num_workers} worker(s)...")
    start_time = time.perf_counter()

    init_args = (noise_params, lut, tile_dir, tile_res, tile_size)

    def collect(results_iterator):
        for result in tqdm(results_iterator, total=total_tiles, desc="Baking Tiles"):
            tile_map[result['ty'], result['tx']] = result['hash']
            if result['hash'] not in saved_hashes:
                saved_hashes.add(result['hash'])
                compression_stats[result['compression_type']] += 1

    if num_workers == 1:
        init_worker(*init_args)
        collect(map(process_tile, tasks))
    else:
        with multiprocessing.Pool(processes=num_workers, initializer=init_worker, initargs=init_args) as pool:
            collect(pool.imap_unordered(process_tile, tasks))

    # --- Finalization ---
    manifest = {
        'noise_parameters': main_generator.settings,
        'tile_resolution_pixels': tile_res,
        'tile_size': tile_size,
        'palette': palette,
        'tile_map': tile_map.tolist(),
    }
    os.makedirs(base_output_dir, exist_ok=True)
    manifest_path = os.path.join(base_output_dir, "manifest.json")
    with open(manifest_path, 'w') as f:
        json.dump(manifest, f, indent=2)

    end_time = time.perf_counter()
    logger.info(f"Baking complete! Total time: {end_time - start_time:.2f} seconds.")
    logger.info(
        f"  - {total_tiles} total -> {len(saved_hashes)} unique tiles saved "
        f"({compression_stats['uniform']} uniform, {compression_stats['palettized']} palettized, "
        f"{compression_stats['full']} full)"
    )
    logger.info(f"Baked tiles and manifest.json saved to: {base_output_dir}")
    return manifest_path


# --- Command-Line Interface ---
def main(argv=None):
    parser = argparse.ArgumentParser(description="Offline Noise Baker for the noise_generator package.")
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to the JSON configuration file describing the noise to bake."
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory. Defaults to baked_noise/<noise_type>_seed_<seed>."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    manifest_path = bake_noise(args.config, args.output)
    return 0 if manifest_path else 1


if __name__ == "__main__":
    sys.exit(main())
