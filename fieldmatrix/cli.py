"""Interactive text menu for building matrices and running operations on them."""

from __future__ import annotations

import re
import sys
from typing import Iterator, Optional, TextIO

from fieldmatrix.fields import Field, of_double, of_int
from fieldmatrix.matrix import Matrix, MatrixError

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

_MENU = (
    "\n"
    "1) Choose field (int/double)\n"
    "2) Create(recreate) matrix1 (N)\n"
    "3) Create(recreate) matrix2 (N)\n"
    "4) Set element in matrix\n"
    "5) Print Matrix\n"
    "6) Add Matrices: C = A + B\n"
    "7) Multiply Matrices: C = A * B\n"
    "8) Scalar Multiply\n"
    "9) Add Linear Combination\n"
    "0) Exit\n"
)


class _Tokens:
    """Whitespace-separated words read lazily from a stream.

    A word that fails to parse is left in place, so the next read sees it again.
    """

    def __init__(self, stream: TextIO) -> None:
        self._source = self._generate(stream)
        self._pending: Optional[str] = None

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def peek(self) -> Optional[str]:
        if self._pending is None:
            self._pending = next(self._source, None)
        return self._pending

    def consume(self) -> None:
        self._pending = None

    def read_int(self) -> Optional[int]:
        word = self.peek()
        if word is None or not _INTEGER_PATTERN.fullmatch(word):
            return None
        self.consume()
        return int(word)

    def read_value(self, field: Field) -> Optional[object]:
        word = self.peek()
        if word is None:
            return None
        try:
            value = field.parse(word)
        except ValueError:
            return None
        self.consume()
        return value


class _InputEnded(Exception):
    """The input ran out or held something other than a number where one was needed."""


class Session:
    """One run of the menu, holding the chosen field and the three matrices."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        self._tokens = _Tokens(input_stream if input_stream is not None else sys.stdin)
        self._output = output_stream if output_stream is not None else sys.stdout
        self.field: Optional[Field] = None
        self.matrix1: Optional[Matrix] = None
        self.matrix2: Optional[Matrix] = None
        self.out: Optional[Matrix] = None

    def _say(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _int(self) -> int:
        value = self._tokens.read_int()
        if value is None:
            raise _InputEnded
        return value

    def run(self) -> bool:
        """Serve menu commands until exit; return False if input ended or was malformed."""
        handlers = {
            1: self._choose_field,
            2: lambda: self._create(1),
            3: lambda: self._create(2),
            4: self._set_element,
            5: self._print_matrix,
            6: lambda: self._combine(add=True),
            7: lambda: self._combine(add=False),
            8: self._scalar_multiply,
            9: self._linear_combination,
        }
        while True:
            self._say(_MENU)
            self._say("Enter command: ")
            command = self._tokens.read_int()
            if command is None:
                self._say("\nInput ERROR!\n")
                return False
            if command == 0:
                return True
            handler = handlers.get(command)
            if handler is None:
                self._say("Wrong number!\n")
                continue
            if command != 1 and self.field is None:
                self._say("You didn't choose the field!\n")
                continue
            try:
                handler()
            except _InputEnded:
                return False

    def _choose_field(self) -> None:
        self._say("1) Int\n2) Double\n")
        self._say("Choose field: ")
        choice = self._int()
        fields = {1: of_int(), 2: of_double()}
        if choice not in fields:
            self._say("Wrong number!\n")
            return
        self.field = fields[choice]
        self.matrix1 = self.matrix2 = self.out = None
        self._say("Field was chosen successfully!\n")

    def _create(self, which: int) -> None:
        self._say(f"Size of Matrix{which}: ")
        size = self._int()
        if size <= 0:
            self._say("Wrong size!\n")
            return
        self.out = None
        try:
            matrix: Optional[Matrix] = Matrix(size, self.field)
        except MatrixError:
            matrix = None
        if which == 1:
            self.matrix1 = matrix
        else:
            self.matrix2 = matrix
        if matrix is None:
            self._say(f"Failed to create matrix{which}!\n")
            return
        self._say(f"Matrix{which} was created successfully!\n")

    def _pick(self, allow_out: bool) -> Optional[Matrix]:
        if allow_out:
            self._say("Choose the matrix (1, 2, 3): ")
            choices = {1: self.matrix1, 2: self.matrix2, 3: self.out}
        else:
            self._say("Choose the matrix (1, 2): ")
            choices = {1: self.matrix1, 2: self.matrix2}
        number = self._int()
        if number not in choices:
            self._say("Wrong matrix number!\n")
            return None
        matrix = choices[number]
        if matrix is None:
            self._say("You didn't create this matrix!\n")
        return matrix

    def _set_element(self) -> None:
        matrix = self._pick(allow_out=False)
        if matrix is None:
            return
        self._say("Enter matrix indices (i, j): ")
        i = self._int()
        j = self._int()
        if not (0 <= i < matrix.size and 0 <= j < matrix.size):
            self._say("Index is larger than matrix size!\n")
            return
        self._say("Enter value: ")
        value = self._tokens.read_value(matrix.field)
        if value is None:
            self._say("Input error!\n")
            return
        try:
            matrix[i, j] = value
        except (MatrixError, IndexError):
            self._say("Failed to set element!\n")
        self._say("Element was set successfully!\n")

    def _print_matrix(self) -> None:
        matrix = self._pick(allow_out=True)
        if matrix is None:
            return
        self._say("Matrix:\n")
        self._say(matrix.format())

    def _combine(self, add: bool) -> None:
        if self.matrix1 is None:
            self._say("First Matrix is not created!\n")
            return
        if self.matrix2 is None:
            self._say("Second Matrix is not created!\n")
            return
        if self.matrix1.size != self.matrix2.size:
            self._say("Matrices have different sizes!\n")
            return
        if self.out is None:
            try:
                self.out = Matrix(self.matrix1.size, self.matrix1.field)
            except MatrixError:
                self._say("Failed to create output matrix!\n")
                return
        try:
            if add:
                self.matrix1.add(self.matrix2, self.out)
            else:
                self.matrix1.multiply(self.matrix2, self.out)
        except MatrixError:
            self._say("Addition failed!\n" if add else "Multiplication failed!\n")
            return
        self._say("Result was written to output matrix!\n")

    def _scalar_multiply(self) -> None:
        matrix = self._pick(allow_out=True)
        if matrix is None:
            return
        self._say("Enter scalar: ")
        scalar = self._tokens.read_value(matrix.field)
        if scalar is None:
            self._say("Input error!\n")
            return
        try:
            matrix.scale(scalar, matrix.field)
        except MatrixError:
            self._say("Scalar multiplication failed!\n")
            return
        self._say("Scalar multiplication was successful!\n")

    def _linear_combination(self) -> None:
        matrix = self._pick(allow_out=False)
        if matrix is None:
            return
        self._say("Enter row index: ")
        row = self._int()
        if not 0 <= row < matrix.size:
            self._say("Wrong row index!\n")
            return
        self._say(f"Enter {matrix.size} coefficients:\n")
        coefficients = []
        for _ in range(matrix.size):
            value = self._tokens.read_value(matrix.field)
            if value is None:
                self._say("Input error!\n")
                return
            coefficients.append(value)
        try:
            matrix.add_linear_combination(row, coefficients)
        except (MatrixError, IndexError):
            self._say("Operation failed!\n")
            return
        self._say("Linear combination was added successfully!\n")


def run_menu(input_stream: TextIO, output_stream: TextIO) -> bool:
    """Run the menu over the given streams; return True if it ended with the exit command."""
    return Session(input_stream, output_stream).run()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())