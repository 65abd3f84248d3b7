import pygame

from via_romana.config import WINDOW_TITLE
from .assets import COLORS


class ScoreBoard:
    """Score sink: remembers the latest score, shows it in the HUD and caption."""

    def __init__(self, title=WINDOW_TITLE):
        self.title = title
        self.score = 0
        self._font = None

    def __call__(self, score):
        self.score = score
        if pygame.display.get_init():
            pygame.display.set_caption(f"{self.title} | Denarii: {score}")

    def draw(self, surface):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("Georgia", 18, bold=True)

        text = self._font.render(f"Denarii: {self.score}", True, COLORS["ui_text_accent"])
        pad = 6
        box = pygame.Surface((text.get_width() + pad * 2, text.get_height() + pad * 2),
                             pygame.SRCALPHA)
        box.fill((*COLORS["ui_bg"], 200))
        pygame.draw.rect(box, COLORS["ui_border_gold"], box.get_rect(), 1)
        box.blit(text, (pad, pad))
        surface.blit(box, (10, 10))
