import time

from models.sudoku_grid import NO_VALUE, MIN_VALUE, MAX_VALUE


class SudokuSolver:
    def __init__(self):
        self.placements = 0
        self.backtracks = 0
        self.elapsed = 0.0

    def is_valid(self, grid, row, col):
        """Check if the value placed at (row, col) keeps its row, column and box valid"""
        return grid.cell_is_consistent(row, col)

    def solve(self, grid):
        """Solve Sudoku in place using backtracking; False if no solution exists"""
        self.placements = 0
        self.backtracks = 0
        start_time = time.perf_counter()

        # Givens that already clash can never be completed
        if not self.is_valid_sudoku(grid):
            self.elapsed = time.perf_counter() - start_time
            return False

        solved = self._solve_helper(grid)
        self.elapsed = time.perf_counter() - start_time
        return solved

    def _solve_helper(self, grid):
        """Recursive helper for solving"""
        cell = grid.find_empty_cell()
        if cell is None:
            return True

        i, j = cell
        for num in range(MIN_VALUE, MAX_VALUE + 1):
            grid.set(i, j, num)
            self.placements += 1

            if self.is_valid(grid, i, j) and self._solve_helper(grid):
                return True

            grid.set(i, j, NO_VALUE)  # Backtrack
            self.backtracks += 1

        return False

    def is_valid_sudoku(self, grid):
        """Check if the current grid state is valid"""
        return grid.is_consistent()
