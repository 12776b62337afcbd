"""Nest preview window.

R: new nest, H: reinforcement hornet, arrows: pan, +/-: zoom, O: toggle outlines,
Esc: quit.
"""

import argparse
import logging
import sys

import pygame

from waspnest.config import WIDTH, HEIGHT, FPS, BG, WHITE
from waspnest.level.config_loader import load_nest_config
from waspnest.level.enemy_placement import pick_reinforcement_room, plan_enemy_spawns
from waspnest.level.nest_generator import generate_level_nest
from waspnest.level.nest_validation import summarize_nest, validate_nest
from waspnest.level.seed_manager import ENEMIES, SeedManager
from waspnest.tiles.tile_renderer import NestPreviewRenderer

logger = logging.getLogger(__name__)

PAN_SPEED = 600  # world pixels per second at zoom 1


class NestViewer:
    def __init__(self, world_seed=None, config_path=None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Wasp Nest")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 20)

        self.config = load_nest_config(config_path)
        self.seeds = SeedManager(world_seed)
        self.renderer = NestPreviewRenderer(self.config.tile_size)
        self.level_index = 0
        self.zoom = 0.25
        self.show_outlines = True
        self.regenerate()

    def regenerate(self):
        self.nest = generate_level_nest(self.seeds, self.level_index, self.config)
        self.renderer.clear_cache()
        self.hornets = sum(spawn.count for spawn in plan_enemy_spawns(self.nest.graph))
        errors = validate_nest(self.nest, self.config)
        for error in errors:
            logger.warning("Nest invariant violated: %s", error)
        logger.info("Level %d (seed %s): %s", self.level_index, self.nest.seed, summarize_nest(self.nest))
        self.center_on_queen()

    def add_reinforcement(self):
        room = pick_reinforcement_room(self.nest.graph, self.seeds.get_random(ENEMIES))
        if room is None:
            logger.info("No room can take a reinforcement hornet")
            return
        self.hornets += 1
        logger.info("Reinforcement hornet in room %d (depth %d)", room.id, room.depth)

    def center_on_queen(self):
        qx, qy = self.nest.queen_room.center
        self.camera = [qx - WIDTH / (2 * self.zoom), qy - HEIGHT / (2 * self.zoom)]

    def handle_events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                return False
            if ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    return False
                elif ev.key == pygame.K_r:
                    self.level_index += 1
                    self.regenerate()
                elif ev.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self.zoom = min(2.0, self.zoom * 2)
                    self.center_on_queen()
                elif ev.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    self.zoom = max(0.0625, self.zoom / 2)
                    self.center_on_queen()
                elif ev.key == pygame.K_o:
                    self.show_outlines = not self.show_outlines
                elif ev.key == pygame.K_h:
                    self.add_reinforcement()
        return True

    def update(self, dt):
        keys = pygame.key.get_pressed()
        step = PAN_SPEED * dt / self.zoom
        if keys[pygame.K_LEFT]:
            self.camera[0] -= step
        if keys[pygame.K_RIGHT]:
            self.camera[0] += step
        if keys[pygame.K_UP]:
            self.camera[1] -= step
        if keys[pygame.K_DOWN]:
            self.camera[1] += step

    def draw(self):
        self.screen.fill(BG)
        self.renderer.render(self.screen, self.nest, tuple(self.camera), self.zoom,
                             show_outlines=self.show_outlines)
        summary = summarize_nest(self.nest)
        text = (f"level {self.level_index}  seed {self.nest.seed}  rooms {summary['rooms']}  "
                f"worms {summary['spawn_points']}  hornets {self.hornets}  zoom {self.zoom:g}")
        self.screen.blit(self.font.render(text, True, WHITE), (8, 8))
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            self.update(dt)
            self.draw()
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Preview generated wasp nests")
    parser.add_argument("--seed", type=int, default=None, help="world seed")
    parser.add_argument("--config", default=None, help="path to nest_config.json")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    NestViewer(world_seed=args.seed, config_path=args.config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
