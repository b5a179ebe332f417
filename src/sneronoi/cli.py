#!/usr/bin/env python3
"""
sneronoi command-line driver.

Picks a scene (spiral arms or stripes) from a seed, runs the t-SNE optimizer
on it and draws the solution as colored Voronoi cells.

Usage:
    sneronoi --seed abc123 --png out.png
    sneronoi --type stripes --perplexity 5 --svg out.svg
    sneronoi --animate
"""

import argparse

from . import config
from .core.rng import SeededRandom
from .core.tsne import TSNE
from .data.scene import SCENE_TYPES, choose_scene
from .visualization import color_system, voronoi_render


def run_tsne(tsne, n_iter, callback=None):
    """
    Take n_iter optimization steps.

    Args:
        tsne (TSNE): an initialized optimizer
        n_iter (int): number of steps
        callback (callable, optional): called as callback(tsne) after every step
    """
    for _ in range(n_iter):
        tsne.take_step()
        if callback is not None:
            callback(tsne)
    return tsne


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description='sneronoi - t-SNE embeddings drawn as Voronoi cells',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sneronoi --seed 42 --png sneronoi_42.png
  sneronoi --type spirals --groups 60 --noise 0.01 --svg out.svg
  sneronoi --animate
        """
    )
    parser.add_argument('--seed', '-s', type=str, default=None,
                        help='Seed for the random source (default: random)')
    parser.add_argument('--iterations', '-i', type=int, default=config.DEFAULT_STEPS,
                        help=f'Total optimization steps (at least {config.MIN_STEPS})')
    parser.add_argument('--warmup', type=int, default=config.WARMUP_STEPS,
                        help='Steps taken before the first animation frame')
    parser.add_argument('--type', '-t', choices=SCENE_TYPES, default=None,
                        help='Input point cloud (default: random)')
    parser.add_argument('--groups', type=int, default=None, help='Number of arms/stripes')
    parser.add_argument('--n', type=int, default=None, help='Points per arm/stripe')
    parser.add_argument('--perplexity', '-p', type=float, default=None, help='t-SNE perplexity')
    parser.add_argument('--noise', type=float, default=None, help='Input noise standard deviation')
    parser.add_argument('--palette', choices=color_system.available_palettes(), default=None,
                        help='Color palette (default: random)')
    parser.add_argument('--svg', type=str, default=None, help='Write the final image as SVG')
    parser.add_argument('--png', type=str, default=None, help='Write the final image as PNG')
    parser.add_argument('--animate', action='store_true',
                        help='Show the optimization live, one step per frame')
    parser.add_argument('--verbose', '-v', action='store_true', help='Report optimizer progress')

    args = parser.parse_args(argv)
    if args.iterations < config.MIN_STEPS:
        parser.error(f"--iterations must be at least {config.MIN_STEPS}")
    if args.warmup < 0 or args.warmup > args.iterations:
        parser.error("--warmup must be between 0 and --iterations")
    return parser, args


def main(argv=None):
    parser, args = parse_arguments(argv)

    rnd = SeededRandom(args.seed, quiet=False)
    try:
        scene = choose_scene(rnd, type=args.type, groups=args.groups, n=args.n,
                             perplexity=args.perplexity, sd=args.noise, palette=args.palette)
        tsne = TSNE(scene.tsne_config(max_iter=args.iterations, verbose=args.verbose), rnd)
    except ValueError as e:
        parser.error(str(e))
    scene.report()

    colormap = color_system.get_colormap(scene.palette, scene.distortion)
    colors = color_system.point_colors(colormap, scene.npoints)

    tsne.init_data(scene.points)
    run_tsne(tsne, args.warmup)

    fig, ax, cells = voronoi_render.draw_solution(tsne.solution, colors)

    if args.animate:
        import matplotlib.pyplot as plt
        from matplotlib.animation import FuncAnimation

        def update(frame):
            tsne.take_step()
            voronoi_render.update_voronoi(cells, voronoi_render.scale_coords(tsne.solution))
            if tsne.current_iter == args.iterations:
                print("Gradient descent completed")
            return (cells,)

        anim = FuncAnimation(fig, update, frames=args.iterations - args.warmup,
                             interval=config.FRAME_INTERVAL, blit=False, repeat=False)
        plt.show()
    else:
        run_tsne(tsne, args.iterations - args.warmup)
        voronoi_render.update_voronoi(cells, voronoi_render.scale_coords(tsne.solution))
        print("Gradient descent completed")

    if args.svg:
        print("Save to svg")
        voronoi_render.save_svg(fig, args.svg)
    if args.png:
        print("Save to png")
        voronoi_render.save_png(fig, args.png)
    return tsne


if __name__ == "__main__":
    main()
