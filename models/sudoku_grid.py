import numpy as np

BOARD_SIZE = 9
SUBSECTION_SIZE = 3
NO_VALUE = 0
MIN_VALUE = 1
MAX_VALUE = 9


class SudokuGrid:
    """9x9 Sudoku board. 0 marks an empty cell."""

    def __init__(self, values):
        try:
            rows = [list(row) for row in values]
        except TypeError as e:
            raise ValueError(f"Grid must be {BOARD_SIZE}x{BOARD_SIZE}") from e

        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Grid must be {BOARD_SIZE}x{BOARD_SIZE}")

        self.cells = []
        for i, row in enumerate(rows):
            clean_row = []
            for j, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise ValueError(f"Cell [{i},{j}] is not an integer: {value!r}")
                if not NO_VALUE <= value <= MAX_VALUE:
                    raise ValueError(f"Cell [{i},{j}] out of range {NO_VALUE}-{MAX_VALUE}: {value}")
                clean_row.append(int(value))
            self.cells.append(clean_row)

    def get(self, row, column):
        return self.cells[row][column]

    def set(self, row, column, value):
        self.cells[row][column] = value

    def __eq__(self, other):
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return self.cells == other.cells

    def _check_cell(self, row, column, seen):
        """Mark the digit at (row, column) in seen; False if it was already marked"""
        value = self.cells[row][column]
        if value != NO_VALUE:
            if seen[value - 1]:
                return False
            seen[value - 1] = True
        return True

    def row_is_consistent(self, row):
        """No digit repeats in the given row"""
        seen = [False] * BOARD_SIZE
        for column in range(BOARD_SIZE):
            if not self._check_cell(row, column, seen):
                return False
        return True

    def column_is_consistent(self, column):
        """No digit repeats in the given column"""
        seen = [False] * BOARD_SIZE
        for row in range(BOARD_SIZE):
            if not self._check_cell(row, column, seen):
                return False
        return True

    def block_is_consistent(self, row, column):
        """No digit repeats in the 3x3 block containing (row, column)"""
        seen = [False] * BOARD_SIZE
        block_row_start = (row // SUBSECTION_SIZE) * SUBSECTION_SIZE
        block_col_start = (column // SUBSECTION_SIZE) * SUBSECTION_SIZE

        for r in range(block_row_start, block_row_start + SUBSECTION_SIZE):
            for c in range(block_col_start, block_col_start + SUBSECTION_SIZE):
                if not self._check_cell(r, c, seen):
                    return False
        return True

    def cell_is_consistent(self, row, column):
        """Row, column and block of (row, column) are all consistent"""
        return (self.row_is_consistent(row) and
                self.column_is_consistent(column) and
                self.block_is_consistent(row, column))

    def is_consistent(self):
        """Check every row, column and block of the whole grid"""
        for i in range(BOARD_SIZE):
            if not self.row_is_consistent(i) or not self.column_is_consistent(i):
                return False

        for row in range(0, BOARD_SIZE, SUBSECTION_SIZE):
            for column in range(0, BOARD_SIZE, SUBSECTION_SIZE):
                if not self.block_is_consistent(row, column):
                    return False
        return True

    def find_empty_cell(self):
        """First empty cell in row-major order, or None"""
        for i in range(BOARD_SIZE):
            for j in range(BOARD_SIZE):
                if self.cells[i][j] == NO_VALUE:
                    return i, j
        return None

    def copy(self):
        return SudokuGrid(self.to_list())

    def to_list(self):
        return [row[:] for row in self.cells]

    def to_array(self):
        return np.array(self.cells, dtype=np.uint8)

    def __str__(self):
        # Each value followed by a space, one row per line
        return "".join("".join(f"{value} " for value in row) + "\n" for row in self.cells)

    def format_pretty(self):
        """Console view with '.' for empty cells and block separators"""
        lines = []
        for i, row in enumerate(self.cells):
            if i % SUBSECTION_SIZE == 0 and i != 0:
                lines.append("------+-------+------")

            row_str = ""
            for j, cell in enumerate(row):
                if j % SUBSECTION_SIZE == 0 and j != 0:
                    row_str += "| "
                row_str += str(cell if cell != NO_VALUE else '.') + " "

            lines.append(row_str.rstrip())
        return "\n".join(lines)

    def __repr__(self):
        return f"SudokuGrid({self.cells!r})"
