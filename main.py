import argparse
import sys

from models.sudoku_grid import SudokuGrid, BOARD_SIZE, MAX_VALUE
from models.sudoku_solver import SudokuSolver
from utils.image_processing import render_solution_image, save_image, show_image

# "World's Hardest Sudoku" (Arto Inkala, 2012)
SAMPLE_PUZZLE = [
    [8, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 3, 6, 0, 0, 0, 0, 0],
    [0, 7, 0, 0, 9, 0, 2, 0, 0],
    [0, 5, 0, 0, 0, 7, 0, 0, 0],
    [0, 0, 0, 0, 4, 5, 7, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 3, 0],
    [0, 0, 1, 0, 0, 0, 0, 6, 8],
    [0, 0, 8, 5, 0, 0, 0, 1, 0],
    [0, 9, 0, 0, 0, 0, 4, 0, 0],
]


class SudokuApp:
    def __init__(self, puzzle=SAMPLE_PUZZLE):
        self.sudoku_solver = SudokuSolver()
        self.current_grid = SudokuGrid(puzzle)
        self.solution_grid = None

    def run(self, corrections=False, image_path=None, show=False):
        self.print_grid(self.current_grid, "Puzzle:")

        if corrections:
            self.read_corrections()

        # Solve a copy so the givens stay available for rendering
        print("\nSolving Sudoku...")
        grid = self.current_grid.copy()

        if not self.sudoku_solver.solve(grid):
            print("Could not solve Sudoku. Please check if the grid is valid.")
            if not self.sudoku_solver.is_valid_sudoku(grid):
                print("The grid contains invalid numbers (duplicates in row/column/box).")
            return False

        self.solution_grid = grid
        print("Sudoku solved!\n")
        print(grid, end="")
        self.print_grid(grid, "Solution:")
        print(f"\nPlacements: {self.sudoku_solver.placements}, "
              f"Backtracks: {self.sudoku_solver.backtracks}, "
              f"Time: {self.sudoku_solver.elapsed:.4f}s")

        if image_path or show:
            image = render_solution_image(self.current_grid, self.solution_grid)
            if image_path:
                if save_image(image_path, image):
                    print(f"Solution image saved to {image_path}")
                else:
                    print(f"Error: Could not write image to {image_path}")
            if show:
                show_image(image)

        return True

    def read_corrections(self):
        """Let the user fix cells before solving"""
        print("\nEnter corrections in format: row,col,digit (e.g., 0,1,5)")
        print("Press Enter to skip corrections")

        while True:
            correction = input("Enter correction (or press Enter to continue): ").strip()
            if not correction:
                break

            try:
                parts = correction.split(',')
                if len(parts) == 3:
                    row, col, digit = map(int, parts)
                    if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE and 0 <= digit <= MAX_VALUE:
                        previous = self.current_grid.get(row, col)
                        self.current_grid.set(row, col, digit)
                        print(f"Corrected cell [{row},{col}] from {previous} to {digit}")
                        self.print_grid(self.current_grid, "Corrected Grid:")
                    else:
                        print(f"Invalid values. Use row,col,digit with values 0-{BOARD_SIZE - 1} for row/col "
                              f"and 0-{MAX_VALUE} for digit")
                else:
                    print("Invalid format. Use: row,col,digit")
            except ValueError:
                print("Invalid input. Use numbers only in format: row,col,digit")

    def print_grid(self, grid, title="Grid:"):
        """Print grid to console"""
        print(f"\n{title}")
        print(grid.format_pretty())


def main(argv=None, puzzle=SAMPLE_PUZZLE):
    parser = argparse.ArgumentParser(description="Solve a Sudoku puzzle by backtracking")
    parser.add_argument('--interactive', action='store_true',
                        help="correct cells of the sample puzzle before solving")
    parser.add_argument('--image', metavar='PATH',
                        help="save the solved grid as an image")
    parser.add_argument('--show', action='store_true',
                        help="show the solved grid in a window")
    args = parser.parse_args(argv)

    try:
        app = SudokuApp(puzzle)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    solved = app.run(corrections=args.interactive, image_path=args.image, show=args.show)
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
