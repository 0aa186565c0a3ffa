"""
Basic seam carving example.

Shows the energy map and the first vertical and horizontal seams of an
image, then removes a handful of seams in each direction and saves the
result.
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from seamcarver import SeamCarver, load_picture, save_picture, setup_logging


def visualize_seams(carver: SeamCarver, path: str):
    """Plot the picture with its seams next to its energy map."""
    vertical = carver.find_vertical_seam()
    horizontal = carver.find_horizontal_seam()

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].imshow(carver.picture().to_array())
    axes[0].plot(vertical, np.arange(carver.height()), 'r-', linewidth=1)
    axes[0].plot(np.arange(carver.width()), horizontal, 'c-', linewidth=1)
    axes[0].set_title('Minimum-energy seams')
    axes[0].axis('off')

    # Border pixels dominate the scale, so clip to the interior range
    energy = carver.energy_map().numpy()
    interior = energy[1:-1, 1:-1]
    vmax = interior.max() if interior.size else None
    axes[1].imshow(energy, cmap='gray', vmin=0, vmax=vmax)
    axes[1].set_title('Dual-gradient energy')
    axes[1].axis('off')

    plt.tight_layout()
    plt.savefig(path, dpi=100)
    plt.close(fig)
    print(f"Saved: {path}")


def main():
    parser = argparse.ArgumentParser(description="Remove seams from an image")
    parser.add_argument('image', type=str, help='Input image path')
    parser.add_argument(
        '--vertical', type=int, default=10,
        help='Number of vertical seams to remove (default: 10)'
    )
    parser.add_argument(
        '--horizontal', type=int, default=0,
        help='Number of horizontal seams to remove (default: 0)'
    )
    parser.add_argument(
        '--output-dir', type=str, default='../output',
        help='Directory for results (default: ../output)'
    )
    args = parser.parse_args()

    setup_logging('INFO')
    os.makedirs(args.output_dir, exist_ok=True)

    carver = SeamCarver(load_picture(args.image))
    print(f"Picture size: {carver.width()} x {carver.height()}")

    visualize_seams(carver, os.path.join(args.output_dir, 'seams.png'))

    for i in range(min(args.vertical, carver.width() - 1)):
        carver.remove_vertical_seam(carver.find_vertical_seam())
    for i in range(min(args.horizontal, carver.height() - 1)):
        carver.remove_horizontal_seam(carver.find_horizontal_seam())

    print(f"Carved size: {carver.width()} x {carver.height()}")
    save_picture(carver.picture(), os.path.join(args.output_dir, 'carved.png'))


if __name__ == '__main__':
    main()
