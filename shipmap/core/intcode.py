"""
Intcode virtual machine.

Runs the droid program. Input and output are plain callables so the VM can
be driven synchronously in tests or from queues on a worker thread.

Instruction set:
    1  add            5  jump-if-true     9  adjust relative base
    2  multiply       6  jump-if-false    99 halt
    3  input          7  less-than
    4  output         8  equals

Parameter modes: 0 position, 1 immediate, 2 relative.
"""

from typing import Callable, Iterable, Union

POSITION_MODE = 0
IMMEDIATE_MODE = 1
RELATIVE_MODE = 2


class IntcodeError(Exception):
    """Raised for malformed programs and invalid instructions."""

    pass


def parse_program(source: str) -> list[int]:
    """
    Parse comma-separated Intcode source.

    Raises:
        IntcodeError: If the source is empty or contains a non-integer.
    """
    if not source or not source.strip():
        raise IntcodeError("Program is empty")

    program = []
    for index, token in enumerate(source.strip().split(",")):
        token = token.strip()
        try:
            program.append(int(token))
        except ValueError:
            raise IntcodeError(f"Invalid value '{token}' at index {index}") from None
    return program


class IntcodeVm:
    """
    Example usage:
        outputs = []
        vm = IntcodeVm("3,0,4,0,99", lambda: 7, outputs.append)
        vm.run()
        # outputs == [7]
    """

    def __init__(
        self,
        program: Union[str, Iterable[int]],
        read_input: Callable[[], int],
        write_output: Callable[[int], None],
    ):
        if isinstance(program, str):
            program = parse_program(program)
        self._memory = list(program)
        self._read_input = read_input
        self._write_output = write_output
        self._ip = 0
        self._relative_base = 0
        self._halted = False

    @property
    def halted(self) -> bool:
        return self._halted

    def halt(self) -> None:
        """Stop at the next instruction boundary. Safe from other threads."""
        self._halted = True

    def __getitem__(self, address: int) -> int:
        return self._read(address)

    def run(self) -> None:
        """Execute until a halt instruction or halt() is called."""
        while not self._halted:
            self.step()

    def step(self) -> None:
        """Execute a single instruction."""
        instruction = self._read(self._ip)
        opcode = instruction % 100
        modes = (
            instruction // 100 % 10,
            instruction // 1000 % 10,
            instruction // 10000 % 10,
        )

        if opcode == 1:
            self._write(modes, 2, self._param(modes, 0) + self._param(modes, 1))
            self._ip += 4
        elif opcode == 2:
            self._write(modes, 2, self._param(modes, 0) * self._param(modes, 1))
            self._ip += 4
        elif opcode == 3:
            value = self._read_input()
            self._write(modes, 0, value)
            self._ip += 2
        elif opcode == 4:
            value = self._param(modes, 0)
            self._ip += 2
            self._write_output(value)
        elif opcode == 5:
            if self._param(modes, 0) != 0:
                self._ip = self._param(modes, 1)
            else:
                self._ip += 3
        elif opcode == 6:
            if self._param(modes, 0) == 0:
                self._ip = self._param(modes, 1)
            else:
                self._ip += 3
        elif opcode == 7:
            self._write(modes, 2, int(self._param(modes, 0) < self._param(modes, 1)))
            self._ip += 4
        elif opcode == 8:
            self._write(modes, 2, int(self._param(modes, 0) == self._param(modes, 1)))
            self._ip += 4
        elif opcode == 9:
            self._relative_base += self._param(modes, 0)
            self._ip += 2
        elif opcode == 99:
            self._halted = True
        else:
            raise IntcodeError(f"Unknown opcode {opcode} at address {self._ip}")

    def _address(self, modes: tuple[int, int, int], index: int) -> int:
        param_address = self._ip + index + 1
        mode = modes[index]
        if mode == POSITION_MODE:
            return self._read(param_address)
        if mode == IMMEDIATE_MODE:
            return param_address
        if mode == RELATIVE_MODE:
            return self._relative_base + self._read(param_address)
        raise IntcodeError(f"Unknown parameter mode {mode} at address {self._ip}")

    def _param(self, modes: tuple[int, int, int], index: int) -> int:
        return self._read(self._address(modes, index))

    def _write(self, modes: tuple[int, int, int], index: int, value: int) -> None:
        if modes[index] == IMMEDIATE_MODE:
            raise IntcodeError(f"Write in immediate mode at address {self._ip}")
        address = self._address(modes, index)
        self._ensure(address)
        self._memory[address] = value

    def _read(self, address: int) -> int:
        if address < 0:
            raise IntcodeError(f"Negative address {address}")
        if address >= len(self._memory):
            return 0
        return self._memory[address]

    def _ensure(self, address: int) -> None:
        if address < 0:
            raise IntcodeError(f"Negative address {address}")
        if address >= len(self._memory):
            self._memory.extend([0] * (address + 1 - len(self._memory)))
