# Basic
LOAD = 0x00     # V -> R1
INP = 0x01      # C[U2]() -> R1
OUT = 0x02      # R1 -> C[U2]

# Arithmetic
ADD = 0x03      # R2 +  R3 -> R1
SUB = 0x04      # R2 -  R3 -> R1
MUL = 0x05      # R2 *  R3 -> R1
DIV = 0x06      # R2 /  R3 -> R1
MOD = 0x07      # R2 %  R3 -> R1
LSH = 0x08      # R2 << R3 -> R1
RSH = 0x09      # R2 >> R3 -> R1

# Flow
CMP = 0x0A      # R1 - R2 -> CR
JMP = 0x0B      # if CR .U1 jmp A

# Logical
AND = 0x0C      # R2 & R3 -> R1
BOR = 0x0D      # R2 | R3 -> R1
NOT = 0x0E      # ~R2 -> R1
XOR = 0x0F      # R2 ^ R3 -> R1

HLT = 0xFF

# Jump conditions, tested against the compare register
JMP_UNCONDITIONAL = 0x00
JMP_EQUAL = 0x01            # CR == 0
JMP_NOT_EQUAL = 0x02        # CR != 0
JMP_ABOVE = 0x03            # CR > 0
JMP_ABOVE_OR_EQUAL = 0x04   # CR >= 0
JMP_BELOW = 0x05            # CR < 0
JMP_BELOW_OR_EQUAL = 0x06   # CR <= 0

MNEMONICS = {
    LOAD: 'load',
    INP: 'input',
    OUT: 'output',
    ADD: 'add',
    SUB: 'subtract',
    MUL: 'multiply',
    DIV: 'divide',
    MOD: 'modulus',
    LSH: 'leftshift',
    RSH: 'rightshift',
    CMP: 'compare',
    JMP: 'jump',
    AND: 'logicaland',
    BOR: 'logicalor',
    NOT: 'logicalnot',
    XOR: 'logicalxor',
    HLT: 'halt'
}

CONDITIONS = {
    'unconditional': JMP_UNCONDITIONAL,
    'equal': JMP_EQUAL,
    'notequal': JMP_NOT_EQUAL,
    'above': JMP_ABOVE,
    'aboveorequal': JMP_ABOVE_OR_EQUAL,
    'below': JMP_BELOW,
    'beloworequal': JMP_BELOW_OR_EQUAL
}
