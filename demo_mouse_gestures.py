#!/usr/bin/env python3
"""Mouse Gesture Demo with Text Feedback.

Hold the trigger button inside the window and draw a gesture. Both the
segment recognizer and the template recognizer classify the same stroke;
the active one drives a dry-run dispatcher so you can see which command
would run.
"""

import logging
from typing import List, Optional, Tuple

import pygame

from gesture_nav.actions.action_surface import DryRunActionSurface
from gesture_nav.actions.dispatcher import GestureActionMap
from gesture_nav.config.settings import GestureConfig, RecognitionConfig, TriggerButton
from gesture_nav.gestures.segment_recognizer import GestureRecognizer
from gesture_nav.gestures.template_recognizer import TemplateRecognizer

# pygame numbers mouse buttons 1=left, 2=middle, 3=right
PYGAME_BUTTONS = {
    TriggerButton.RIGHT_CLICK: 3,
    TriggerButton.WHEEL_CLICK: 2,
}

TEMPLATES_FILE = "user_templates.json"


class GestureDemo:
    """Interactive demo for both recognition backends."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((1200, 800))
        pygame.display.set_caption("Mouse Gesture Demo")

        self.trigger = PYGAME_BUTTONS[GestureConfig.TRIGGER_BUTTON]
        self.segment_recognizer = GestureRecognizer()
        self.recognition_config = RecognitionConfig()
        self.template_recognizer = TemplateRecognizer(self.recognition_config)
        self.actions = DryRunActionSurface()
        self.dispatcher = GestureActionMap(self.actions)
        self.use_templates = False

        self.is_drawing = False
        self.last_stroke: List[Tuple[int, int]] = []
        self.segment_result: Optional[str] = None
        self.template_result: Optional[str] = None
        self.template_score = 0.0
        self.status = ""

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GREEN = (0, 150, 0)
        self.GRAY = (128, 128, 128)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 32)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == self.trigger:
                        self.start_gesture(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.is_drawing:
                        self.continue_gesture(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == self.trigger and self.is_drawing:
                        self.finish_gesture()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_t:
                        self.use_templates = not self.use_templates
                    elif event.key == pygame.K_a:
                        self.add_last_stroke()
                    elif event.key == pygame.K_s:
                        self.save_templates()
                    elif event.key == pygame.K_l:
                        self.load_templates()
                    elif event.key == pygame.K_UP:
                        self.adjust_threshold(0.05)
                    elif event.key == pygame.K_DOWN:
                        self.adjust_threshold(-0.05)

            self.draw()
            clock.tick(60)

    def start_gesture(self, pos: Tuple[int, int]) -> None:
        self.is_drawing = True
        self.last_stroke = [pos]
        self.segment_recognizer.start(*pos)
        self.template_recognizer.start(*pos)

    def continue_gesture(self, pos: Tuple[int, int]) -> None:
        self.last_stroke.append(pos)
        self.segment_recognizer.add_point(*pos)
        self.template_recognizer.add_point(*pos)

    def finish_gesture(self) -> None:
        """Classify with both backends and dispatch the active one."""
        self.is_drawing = False
        self.segment_result = self.segment_recognizer.end()
        result = self.template_recognizer.recognize(self.last_stroke)
        self.template_score = result.score
        self.template_result = self.template_recognizer.end()

        gesture = self.template_result if self.use_templates else self.segment_result
        self.dispatcher.execute(gesture)
        glyph, label = self.dispatcher.describe(gesture)
        self.status = f"{glyph} {label}".strip()

    def add_last_stroke(self) -> None:
        """Store the last stroke as a template named after its segment gesture."""
        if not self.segment_result or len(self.last_stroke) < 2:
            self.status = "Draw a recognized gesture first"
            return
        count = self.template_recognizer.add_template(self.segment_result, self.last_stroke)
        self.status = f"Added template '{self.segment_result}' ({count} total)"

    def save_templates(self) -> None:
        self.template_recognizer.save_templates(TEMPLATES_FILE)
        self.status = f"Saved user templates to {TEMPLATES_FILE}"

    def load_templates(self) -> None:
        loaded = self.template_recognizer.load_templates(TEMPLATES_FILE)
        self.status = f"Loaded {loaded} templates"

    def adjust_threshold(self, delta: float) -> None:
        current = self.recognition_config.get_threshold()
        self.recognition_config.set_threshold(current + delta)

    def draw(self) -> None:
        """Render the text UI."""
        self.screen.fill(self.WHITE)
        backend = "template" if self.use_templates else "segment"
        lines = [
            f"Hold {GestureConfig.TRIGGER_BUTTON.name} and draw a gesture",
            "T: Toggle backend   A: Add last stroke as template",
            "S: Save templates   L: Load templates   UP/DOWN: Adjust threshold",
            f"Active backend: {backend}",
            f"Template threshold: {self.recognition_config.get_threshold():.2f}",
            f"Commands run (dry): {len(self.actions.calls)}",
        ]
        y = 10
        for line in lines:
            self.screen.blit(self.small_font.render(line, True, self.BLACK), (10, y))
            y += 32

        live = " → ".join(self.segment_recognizer.segments) if self.is_drawing else ""
        if live:
            self.screen.blit(self.font.render(live, True, self.GRAY), (10, 300))

        results = [
            f"Segment: {self.segment_result}",
            f"Template: {self.template_result} ({self.template_score:.2f})",
            self.status,
        ]
        y = 500
        for line in results:
            self.screen.blit(self.font.render(line, True, self.GREEN), (10, y))
            y += 56
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    logging.basicConfig(level=logging.INFO)
    demo = GestureDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
