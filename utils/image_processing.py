import cv2
import numpy as np

from models.sudoku_grid import BOARD_SIZE, SUBSECTION_SIZE, NO_VALUE

GIVEN_COLOR = (255, 0, 0)  # Blue (BGR)
SOLVED_COLOR = (0, 150, 0)  # Green
LINE_COLOR = (0, 0, 0)


def render_solution_image(original_grid, solution_grid, cell_size=50):
    """Draw the solved grid, givens in blue and filled digits in green"""
    size = cell_size * BOARD_SIZE
    image = np.ones((size, size, 3), dtype=np.uint8) * 255

    # Draw grid lines
    for i in range(BOARD_SIZE + 1):
        thickness = 3 if i % SUBSECTION_SIZE == 0 else 1
        cv2.line(image, (i * cell_size, 0),
                 (i * cell_size, size), LINE_COLOR, thickness)
        cv2.line(image, (0, i * cell_size),
                 (size, i * cell_size), LINE_COLOR, thickness)

    # Scale the font with the cell so digits stay centred
    font_scale = cell_size / 62.5
    offset_x = cell_size // 5
    offset_y = cell_size // 5

    givens = original_grid.to_array()
    digits = solution_grid.to_array()

    for i in range(BOARD_SIZE):
        for j in range(BOARD_SIZE):
            digit = int(digits[i, j])
            if digit != NO_VALUE:
                x = j * cell_size + cell_size // 2
                y = i * cell_size + cell_size // 2

                color = GIVEN_COLOR if givens[i, j] != NO_VALUE else SOLVED_COLOR

                cv2.putText(image, str(digit), (x - offset_x, y + offset_y),
                            cv2.FONT_HERSHEY_SIMPLEX, font_scale, color, 2)

    return image


def save_image(path, image):
    """Write image to disk; returns True on success"""
    return bool(cv2.imwrite(str(path), image))


def show_image(image, title='Sudoku Solution'):
    """Show image in a window until a key is pressed"""
    cv2.imshow(title, image)
    cv2.waitKey(0)
    cv2.destroyWindow(title)
