class SMCError(Exception):
    pass


# - Assembly - #

class AssemblyError(SMCError):
    pass


class MalformedOperand(AssemblyError):
    def __init__(self, token: str):
        super().__init__(f"Malformed operand '{token}'")
        self.token = token


class MalformedLine(AssemblyError):
    def __init__(self, line: str, message: str | None = None):
        super().__init__(message or f"Malformed line '{line}'")
        self.line = line


class UnrecognizedMnemonic(MalformedLine):
    def __init__(self, line: str):
        super().__init__(line, f"Invalid instruction '{line}'")


class OperandCountMismatch(MalformedLine):
    def __init__(self, line: str, expected: int, actual: int):
        super().__init__(line, f"Expected {expected} operand(s), got {actual} in '{line}'")
        self.expected = expected
        self.actual = actual


class UnrecognizedJumpCondition(AssemblyError):
    def __init__(self, name: str):
        super().__init__(f"Unrecognized jump condition '{name}'")
        self.name = name


class UnresolvedJumpLabel(AssemblyError):
    def __init__(self, label: str):
        super().__init__(f"Jump label '{label}' is invalid")
        self.label = label


class DuplicateJumpLabel(AssemblyError):
    def __init__(self, label: str):
        super().__init__(f"Jump label '{label}' is declared more than once")
        self.label = label


class ProgramTooLarge(AssemblyError):
    def __init__(self, count: int):
        super().__init__(f'Program of {count} instructions does not fit the address space')
        self.count = count


class InstructionLengthError(AssemblyError):
    def __init__(self, length: int):
        super().__init__(f'Program length {length} is not a multiple of the word size')
        self.length = length


# - Execution - #

class ExecutionError(SMCError):
    pass


class EmptyProgramError(ExecutionError):
    def __init__(self):
        super().__init__('No program loaded')


class InvalidAddressError(ExecutionError):
    def __init__(self, counter: int):
        super().__init__(f'No instruction at address {counter}')
        self.counter = counter


class InvalidChannelError(ExecutionError):
    def __init__(self, channel: int, direction: str):
        super().__init__(f'Invalid {direction} channel {channel}')
        self.channel = channel
        self.direction = direction


class InvalidOpcodeError(ExecutionError):
    def __init__(self, opcode: int):
        super().__init__(f'Invalid opcode 0x{opcode:02X}')
        self.opcode = opcode


class DivideByZeroError(ExecutionError):
    def __init__(self, counter: int):
        super().__init__(f'Division by zero at address {counter}')
        self.counter = counter
