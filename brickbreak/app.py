"""Window, asset loading and the main loop for playing with pygame."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, Union

import pygame

from .assets import AssetTable
from .constants import TARGET_FPS, VIRTUAL_HEIGHT, VIRTUAL_WIDTH, WINDOW_HEIGHT, WINDOW_WIDTH
from .game import Color, Game, Key, Keys
from .geometry import Rect

PathLike = Union[str, Path]

TEXTURE_FILES = {
    "background": "graphics/background.png",
    "main": "graphics/breakout.png",
    "arrows": "graphics/arrows.png",
    "hearts": "graphics/hearts.png",
    "particle": "graphics/particle.png",
}

SOUND_FILES = {
    "paddle hit": "sounds/paddle_hit.wav",
    "score": "sounds/score.wav",
    "wall hit": "sounds/wall_hit.wav",
    "confirm": "sounds/confirm.wav",
    "select": "sounds/select.wav",
    "no select": "sounds/no_select.wav",
    "brick hit 1": "sounds/brick-hit-1.wav",
    "brick hit 2": "sounds/brick-hit-2.wav",
    "hurt": "sounds/hurt.wav",
    "victory": "sounds/victory.wav",
    "recover": "sounds/recover.wav",
    "high score": "sounds/high_score.wav",
    "pause": "sounds/pause.wav",
}

FONT_FILE = "fonts/font.ttf"
FPS_COLOR: Color = (0, 158, 47, 255)
FPS_FONT_SIZE = 20

_KEY_BINDINGS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_SPACE: Key.SPACE,
}


class PygameCanvas:
    """Draws sprites and text onto a pygame surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        font: Optional[PathLike] = None,
        textures: Optional[Union[AssetTable, Mapping[str, pygame.Surface]]] = None,
    ) -> None:
        pygame.font.init()
        self.surface = surface
        self._font_path = str(font) if font is not None else None
        self._textures = textures if textures is not None else AssetTable()
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        size = max(int(size), 1)
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(self._font_path, size)
        return font

    def draw_sprite(self, texture: str, source: Optional[Rect], dest: Rect) -> None:
        """Draw ``source`` of the named texture (all of it when None) scaled into ``dest``."""
        image = self._textures.get(texture)
        if image is None:
            raise KeyError(f"unknown texture {texture!r}")
        if source is not None:
            area = pygame.Rect(
                int(source.x), int(source.y), int(source.width), int(source.height)
            ).clip(image.get_rect())
            image = image.subsurface(area)
        size = (max(int(round(dest.width)), 0), max(int(round(dest.height)), 0))
        if 0 in size:
            return
        if size != image.get_size():
            image = pygame.transform.scale(image, size)
        self.surface.blit(image, (int(dest.x), int(dest.y)))

    def draw_text(self, text: str, pos: tuple[float, float], size: int, color: Color) -> None:
        """Draw ``text`` with its top-left corner at ``pos``."""
        rendered = self._font(size).render(text, True, tuple(color[:3]))
        if len(color) > 3 and color[3] < 255:
            rendered.set_alpha(color[3])
        self.surface.blit(rendered, (int(pos[0]), int(pos[1])))

    def measure_text(self, text: str, size: int) -> tuple[float, float]:
        """Width and height of ``text`` drawn at ``size``."""
        width, height = self._font(size).size(text)
        return float(width), float(height)


def _resolve(base: PathLike, files: Mapping[str, str]) -> dict[str, Path]:
    root = Path(base)
    paths = {name: root / relative for name, relative in files.items()}
    for path in paths.values():
        if not path.is_file():
            raise FileNotFoundError(f"missing asset: {path}")
    return paths


def load_textures(base: PathLike) -> AssetTable:
    """Load every texture the game uses from the asset directory ``base``."""
    table = AssetTable()
    for name, path in _resolve(base, TEXTURE_FILES).items():
        table.add(name, pygame.image.load(str(path)))
    return table


def load_sounds(base: PathLike) -> AssetTable:
    """Load every sound the game uses; the mixer must already be running."""
    paths = _resolve(base, SOUND_FILES)
    table = AssetTable()
    for name, path in paths.items():
        table.add(name, pygame.mixer.Sound(str(path)))
    return table


def _sound_player(sounds: Optional[AssetTable]) -> Callable[[str], Any]:
    if sounds is None:
        return lambda name: None

    def play(name: str) -> None:
        sound = sounds.get(name)
        if sound is None:
            raise KeyError(f"unknown sound {name!r}")
        sound.play()

    return play


def _start_audio(base: Path) -> Optional[AssetTable]:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
    except pygame.error:
        return None
    return load_sounds(base)


def _read_keys(events: Sequence[pygame.event.Event]) -> Keys:
    held = pygame.key.get_pressed()
    down = {key for code, key in _KEY_BINDINGS.items() if held[code]}
    pressed = {
        _KEY_BINDINGS[event.key]
        for event in events
        if event.type == pygame.KEYDOWN and event.key in _KEY_BINDINGS
    }
    return Keys(down=down, pressed=pressed)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="brickbreak", description="Play Breakout.")
    parser.add_argument("--assets", default="./assets", help="directory holding the game assets")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames instead of waiting for the window to close",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    base = Path(args.assets)

    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Breakout")
        virtual = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))

        font_path = base / FONT_FILE
        textures = load_textures(base)
        sounds = _start_audio(base)
        canvas = PygameCanvas(virtual, font_path if font_path.is_file() else None, textures)

        game = Game(random.Random(), _sound_player(sounds))
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            dt = clock.tick(TARGET_FPS) / 1000.0
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                running = False
                continue
            game.update(dt, _read_keys(events))

            virtual.fill((0, 0, 0))
            game.draw(canvas)
            canvas.draw_text(f"{round(clock.get_fps()):2d} FPS", (5, 5), FPS_FONT_SIZE, FPS_COLOR)
            window.blit(pygame.transform.scale(virtual, (WINDOW_WIDTH, WINDOW_HEIGHT)), (0, 0))
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()
    return 0