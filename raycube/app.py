"""The interactive game: input handling, the frame loop and the window."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

import pygame

from raycube.errors import SceneError, error_text
from raycube.minimap import draw_minimap
from raycube.player import Action
from raycube.raycast import Frame, Texture, render
from raycube.scene import Scene, load_scene

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
USAGE = "Usage: raycube maps/<map_file>.cub"

KEY_ACTIONS = {
    pygame.K_w: Action.FORWARD,
    pygame.K_s: Action.BACKWARD,
    pygame.K_a: Action.STRAFE_LEFT,
    pygame.K_d: Action.STRAFE_RIGHT,
    pygame.K_LEFT: Action.TURN_LEFT,
    pygame.K_RIGHT: Action.TURN_RIGHT,
}


def load_texture(path: str) -> Texture:
    """Load an image file as a wall texture of packed 0xRRGGBB texels."""
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError):
        raise SceneError("Can not open file") from None
    width, height = surface.get_size()
    data = pygame.image.tostring(surface, "RGB")
    channels = iter(data)
    pixels = [(red << 16) | (green << 8) | blue for red, green, blue in zip(channels, channels, channels)]
    return Texture(width, height, pixels)


class Game:
    """A running scene: held keys, mouse look and the frame being drawn."""

    def __init__(
        self,
        scene: Scene,
        textures: Iterable[Texture],
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self.scene = scene
        self.player = scene.player
        self.textures: Sequence[Texture] = list(textures)
        if len(self.textures) != 4:
            raise ValueError("exactly four wall textures are needed")
        self.frame = Frame(width, height)
        self.held: set[int] = set()
        self.running = True
        self._mouse_centred = False

    @property
    def center(self) -> tuple[int, int]:
        """The window point the mouse is kept at."""
        return self.frame.width // 2, self.frame.height // 2

    @property
    def actions(self) -> set[Action]:
        """Movement actions requested by the keys held now."""
        return {KEY_ACTIONS[key] for key in self.held if key in KEY_ACTIONS}

    def key_down(self, key: int) -> None:
        """Record a pressed key; Escape stops the game."""
        self.held.add(key)
        if key == pygame.K_ESCAPE:
            self.running = False

    def key_up(self, key: int) -> None:
        """Record a released key."""
        self.held.discard(key)

    def mouse_moved(self, x: int, y: int) -> tuple[int, int]:
        """Turn and tilt by the mouse offset from the centre; return the centre."""
        centre_x, centre_y = self.center
        if not self._mouse_centred:
            self._mouse_centred = True
            return centre_x, centre_y
        self.player.mouse_look(x - centre_x, y - centre_y, self.frame.height)
        return centre_x, centre_y

    def tick(self) -> Frame:
        """Advance one frame and draw the view and the minimap."""
        grid = self.scene.grid
        self.player.update(grid, self.actions)
        render(
            self.frame,
            grid,
            self.player,
            self.textures,
            self.scene.floor_color,
            self.scene.ceiling_color,
        )
        draw_minimap(self.frame, grid, self.player)
        return self.frame


def _frame_bytes(frame: Frame) -> bytes:
    return bytes(
        channel
        for color in frame.pixels
        for channel in ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
    )


def _screen_size() -> tuple[int, int]:
    info = pygame.display.Info()
    width, height = info.current_w, info.current_h
    if width <= 0 or height <= 0:
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    return width, height


def _run(game: Game, screen: pygame.Surface) -> None:
    pygame.mouse.set_visible(False)
    pygame.mouse.set_pos(game.center)
    while game.running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.running = False
            elif event.type == pygame.KEYDOWN:
                game.key_down(event.key)
            elif event.type == pygame.KEYUP:
                game.key_up(event.key)
            elif event.type == pygame.MOUSEMOTION:
                pygame.mouse.set_pos(game.mouse_moved(*event.pos))
        if not game.running:
            break
        frame = game.tick()
        image = pygame.image.frombuffer(
            _frame_bytes(frame), (frame.width, frame.height), "RGB"
        )
        screen.blit(image, (0, 0))
        pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        scene = load_scene(args[0])
    except SceneError as exc:
        sys.stdout.write(error_text(exc.message))
        return 1
    pygame.init()
    try:
        width, height = _screen_size()
        try:
            textures = [load_texture(path) for path in scene.textures]
        except SceneError as exc:
            sys.stdout.write(error_text(exc.message))
            return 1
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("raycube")
        _run(Game(scene, textures, width, height), screen)
    finally:
        pygame.quit()
    return 0