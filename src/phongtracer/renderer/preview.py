# renderer/preview.py
import numpy as np
import pygame
from phongtracer.renderer.image_io import front_buffer_to_rgb

def to_surface_array(front_buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Returns the image as a (width, height, 3) array, the x-major layout that
    pygame.surfarray expects.
    """
    return np.ascontiguousarray(front_buffer_to_rgb(front_buffer, width, height).transpose(1, 0, 2))

def show_image(front_buffer: np.ndarray, width: int, height: int,
               title: str = "Phong Ray Tracer"):
    """Opens a window with the finished render and blocks until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        frame_surface = pygame.surfarray.make_surface(to_surface_array(front_buffer, width, height))
        screen.blit(frame_surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
