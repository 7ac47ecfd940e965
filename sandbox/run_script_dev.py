# run_script_dev.py
from __future__ import annotations

import argparse
import sys
import pygame

from cutscene.runtime.player import PlayerConfig, ScriptPlayer
from cutscene.runtime.triggers import all_routines, trigger_routine
from cutscene.scenes import registry as _scenes  # noqa: F401  (seeds the registry)
from cutscene.script.directives import (
    BGM,
    SE,
    Despawn,
    Flash,
    SetTile,
    Shake,
    SpawnRaven,
    Sprite,
    Warp,
)
from cutscene.script.locale import LOCALES
from cutscene.script.routine import ScriptContext
from cutscene.script.state import SPELL_LIST_OPEN, ExternalState

TILE_PX = 16


def _parse_size(s: str) -> tuple[int, int]:
    try:
        a, b = s.lower().replace("x", " ").split()
        return int(a), int(b)
    except Exception:
        raise argparse.ArgumentTypeError(f"Expected WxH (e.g. 1024x768), got: {s!r}")


def _parse_xy(s: str) -> tuple[float, float]:
    try:
        a, b = s.split(",")
        return float(a.strip()), float(b.strip())
    except Exception:
        raise argparse.ArgumentTypeError(f"Expected 'x,y' (e.g. 0,0), got: {s!r}")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Cutscene script player (DEV harness)")
    p.add_argument("--routine", default="GuideRabbit", choices=sorted(all_routines()),
                   help="Routine key to play")
    p.add_argument("--lantern", action="store_true", help="Start with the Lantern in inventory")
    p.add_argument("--actor", default="0,0", type=_parse_xy, help="Actor position as 'x,y'")
    p.add_argument("--lang", default="en", choices=LOCALES, help="Display locale")
    p.add_argument("--window", default="960x540", type=_parse_size, help="Window size WxH")
    p.add_argument("--fps", default=60, type=int, help="Simulation frames per second")
    return p


class DevStage:
    """Just enough presentation to eyeball what a routine asks for."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.size = size
        self.shake = 0.0
        self.shake_decay = 0.0
        self.flashes: list[dict] = []
        self.sprites: dict[str, pygame.math.Vector2] = {}
        self.tiles: dict[tuple[int, int], str] = {}

    def attach(self, player: ScriptPlayer) -> None:
        player.register_handler(Sprite.type, self.on_sprite)
        player.register_handler(SpawnRaven.type, self.on_sprite)
        player.register_handler(Despawn.type, self.on_despawn)
        player.register_handler(Shake.type, self.on_shake)
        player.register_handler(Flash.type, self.on_flash)
        player.register_handler(SetTile.type, self.on_set_tile)
        player.register_handler(SE.type, lambda d: print(f"[DEV] SE {d.path}"))
        player.register_handler(BGM.type, lambda d: print(f"[DEV] BGM {d.path}"))
        player.register_handler(Warp.type, lambda d: self.on_warp(player, d))

    # Handlers -----------------------------------------------------------
    def on_sprite(self, d) -> None:
        self.sprites[d.name] = pygame.math.Vector2(d.position)

    def on_despawn(self, d: Despawn) -> None:
        self.sprites.pop(d.name, None)

    def on_shake(self, d: Shake) -> None:
        self.shake = d.value
        self.shake_decay = d.attenuation

    def on_flash(self, d: Flash) -> None:
        self.flashes.append({"d": d, "t": 0})

    def on_set_tile(self, d: SetTile) -> None:
        for i in range(d.x, d.x + d.w):
            for j in range(d.y, d.y + d.h):
                self.tiles[(i, j)] = d.tile

    def on_warp(self, player: ScriptPlayer, d: Warp) -> None:
        print(f"[DEV] warp -> {d.destination_iid}")
        player.acknowledge()

    # Frame --------------------------------------------------------------
    def tick(self) -> None:
        self.shake = max(0.0, self.shake + self.shake_decay)
        for f in self.flashes:
            f["t"] += 1
        self.flashes = [f for f in self.flashes if f["t"] < f["d"].duration]

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, player: ScriptPlayer, lang: str) -> None:
        w, h = self.size
        center = pygame.math.Vector2(w / 2, h / 2)
        jitter = pygame.math.Vector2(self.shake, 0).rotate(player.frame * 97 % 360)

        for (i, j) in self.tiles:
            rect = pygame.Rect(center.x + i * TILE_PX, center.y + j * TILE_PX, TILE_PX, TILE_PX)
            pygame.draw.rect(screen, (90, 90, 100), rect.move(int(jitter.x), int(jitter.y)))

        for name, pos in self.sprites.items():
            p = center + pos * 0.1 + jitter
            pygame.draw.circle(screen, (80, 200, 120), p, 18)
            screen.blit(font.render(name, True, (220, 220, 220)), p + (22, -8))

        for f in self.flashes:
            d = f["d"]
            k = f["t"] / d.duration
            alpha = int(255 * (k if d.reverse else 1.0 - k))
            overlay = pygame.Surface(self.size, pygame.SRCALPHA)
            pygame.draw.circle(overlay, (255, 255, 255, alpha), center + jitter, d.radius * 0.5)
            screen.blit(overlay, (0, 0))

        if player.speech is not None:
            text = player.speech.get(lang) or player.speech.ja
            box = pygame.Rect(20, h - 110, w - 40, 90)
            pygame.draw.rect(screen, (20, 20, 30), box)
            pygame.draw.rect(screen, (200, 200, 220), box, 2)
            screen.blit(font.render(text[:90], True, (240, 240, 240)), box.move(12, 12))


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_arg_parser().parse_args(argv)

    state = ExternalState(inventory={"Lantern"} if args.lantern else ())
    player = ScriptPlayer(state, PlayerConfig(fps=args.fps))

    pygame.init()
    try:
        screen = pygame.display.set_mode(args.window)
        pygame.display.set_caption(f"Script DEV - {args.routine}")
        font = pygame.font.Font(None, 24)

        stage = DevStage(args.window)
        stage.attach(player)

        def start() -> None:
            ctx = ScriptContext(state=state, actor_position=args.actor, speaker=args.routine)
            if not trigger_routine(player, args.routine, ctx, interrupt=True):
                print(f"[DEV] could not start {args.routine!r}")

        start()

        clock = pygame.time.Clock()
        running = True

        print("[DEV] Controls:")
        print("  SPACE/Click  Acknowledge speech")
        print("  R            Restart routine")
        print("  A            Abort (walk away)")
        print("  F1           Dump state")
        print("  ESC          Quit")

        while running:
            clock.tick(player.config.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.MOUSEBUTTONDOWN:
                    player.acknowledge()

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False

                    elif event.key == pygame.K_SPACE:
                        player.acknowledge()

                    elif event.key == pygame.K_r:
                        start()

                    elif event.key == pygame.K_a:
                        player.abort()

                    elif event.key == pygame.K_F1:
                        state.debug()

            player.update()
            stage.tick()

            # Draw
            screen.fill((0, 0, 0) if not state.get_flag(SPELL_LIST_OPEN) else (30, 10, 40))
            stage.draw(screen, font, player, args.lang)
            pygame.display.flip()

    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
