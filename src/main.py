# main.py
import argparse
import random
import sys
from typing import List, Optional
import numpy as np
import pygame
from core.vector import Point3, Vector3
from renderer.image_output import image_format, save_image
from renderer.raytracer import Renderer
from renderer.settings import RenderSettings
from scene.presets import random_scene, three_spheres_scene
from scene.xml_io import load_scene, save_scene


class Application:
    """
    Window that shows the renderer's pixel buffer. A new frame is rendered
    only when the renderer flags it (start-up, resize, R key); rendering is
    synchronous so the scene is never changed while a frame is in flight.
    """
    def __init__(self, renderer: Renderer):
        pygame.init()
        self.renderer = renderer
        self.screen = pygame.display.set_mode((renderer.width, renderer.height),
                                              pygame.RESIZABLE)
        pygame.display.set_caption("Ray Tracer")
        self.clock = pygame.time.Clock()

    def present(self):
        """Blits the current RGBA buffer to the window."""
        frame = self.renderer.image_array()
        # pygame surfaces are indexed (x, y)
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(frame[:, :, :3].transpose(1, 0, 2)))
        window_size = self.screen.get_size()
        if surface.get_size() != window_size:
            surface = pygame.transform.scale(surface, window_size)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self):
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        elif event.key == pygame.K_r:
                            self.renderer.needs_render = True
                    elif event.type == pygame.VIDEORESIZE:
                        self.renderer.resize(max(event.w, 2), max(event.h, 2))

                if self.renderer.needs_render:
                    pygame.display.set_caption("Ray Tracer - rendering...")
                    self.renderer.render()
                    pygame.display.set_caption(
                        f"Ray Tracer - frame {self.renderer.frame_number}")
                self.present()
                self.clock.tick(30)
        finally:
            pygame.quit()


def to_vector(values: Optional[List[float]]) -> Optional[Vector3]:
    # argparse gives three floats for each vector option, or None when absent
    return Vector3(*values) if values is not None else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a sphere scene with a Monte Carlo ray tracer.")
    parser.add_argument("--scene", default="random",
                        help="'random', 'three-spheres' or the path of an XML scene file (default: random)")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--aspect-ratio", type=float, default=3.0 / 2.0,
                        help="Width / height (default: 1.5)")
    parser.add_argument("--samples", type=int, default=20, help="Samples per pixel (default: 20)")
    parser.add_argument("--max-depth", type=int, default=50, help="Maximum bounces per path (default: 50)")
    parser.add_argument("--look-from", type=float, nargs=3, metavar=("X", "Y", "Z"), help="Camera position")
    parser.add_argument("--look-at", type=float, nargs=3, metavar=("X", "Y", "Z"), help="Camera target")
    parser.add_argument("--vup", type=float, nargs=3, metavar=("X", "Y", "Z"), help="Camera up vector")
    parser.add_argument("--vfov", type=float, default=20.0, help="Vertical field of view in degrees (default: 20)")
    parser.add_argument("--aperture", type=float, default=0.1, help="Lens aperture (default: 0.1)")
    parser.add_argument("--focus-dist", type=float, default=10.0, help="Focus distance (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible renders")
    parser.add_argument("--output", default=None,
                        help="Write the image to this .png or .ppm file instead of opening a window")
    parser.add_argument("--save-scene", default=None, help="Also write the scene to this XML file")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings(
        image_width=args.width,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        look_from=to_vector(args.look_from),
        look_at=to_vector(args.look_at),
        vup=to_vector(args.vup),
        vfov=args.vfov,
        aperture=args.aperture,
        focus_dist=args.focus_dist,
        seed=args.seed,
        verbose=not args.quiet,
    )
    if args.scene == "three-spheres":
        # This scene sits around (0, 0, -1); frame it unless told otherwise.
        if args.look_from is None:
            settings.look_from = Point3(-2, 2, 1)
        if args.look_at is None:
            settings.look_at = Point3(0, 0, -1)
    return settings.validate()


def load_world(name: str, seed: Optional[int]):
    if name == "random":
        return random_scene(random.Random(seed))
    if name == "three-spheres":
        return three_spheres_scene()
    return load_scene(name)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
        if args.output:
            image_format(args.output)
        world = load_world(args.scene, args.seed)
        renderer = Renderer(settings, world)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings.verbose:
        print(f"Scene '{args.scene}': {len(world)} objects")
    if args.save_scene:
        save_scene(world, args.save_scene)

    if args.output:
        pixels = renderer.render()
        try:
            save_image(pixels, renderer.width, renderer.height, args.output)
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        if settings.verbose:
            print(f"Wrote {args.output}")
        return 0

    Application(renderer).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
