# SPDX-License-Identifier: EUPL-1.2

from elfhdr._util import _Enum


MAGIC = b'\x7fELF'


class EI(_Enum):
    ## e_ident
    NIDENT = 0x10  # size
    # indexes
    MAG0 = 0x00
    CLASS = 0x04
    DATA = 0x05
    VERSION = 0x06
    OSABI = 0x07
    ABIVERSION = 0x08
    PAD = 0x09


class ELFCLASS(_Enum):
    NONE = 0
    _32 = 1
    _64 = 2


class ELFDATA(_Enum):
    NONE = 0
    LSB = 1
    MSB = 2


class EV(_Enum):
    NONE = 0x00
    CURRENT = 0x01


class OSABI(_Enum):
    SYSTEM_V = 0x00
    NONE = 0x00
    HP_UX = 0x01
    NETBSD = 0x02
    LINUX = 0x03
    SOLARIS = 0x06
    AIX = 0x07
    IRIX = 0x08
    FREEBSD = 0x09
    TRU64 = 0x0a
    NOVELL_MODESTO = 0x0b
    OPENBSD = 0x0c
    ARM_AEABI = 0x40
    ARM = 0x61
    STANDALONE = 0xff


class ET(_Enum):
    # e_type
    NONE = 0x00
    REL = 0x01
    EXEC = 0x02
    DYN = 0x03
    CORE = 0x04
    NUM = 0x05


class EM(_Enum):
    # e_machine
    NONE = 0
    M32 = 1
    SPARC = 2
    _386 = 3
    _68K = 4
    _88K = 5
    _860 = 7
    MIPS = 8
    MIPS_RS4_BE = 10
    PARISC = 15
    VPP550 = 17
    SPARC32PLUS = 18
    _960 = 19
    PPC = 20
    PPC64 = 21
    S390 = 22
    V800 = 36
    FR20 = 37
    RH32 = 38
    RCE = 39
    ARM = 40
    ALPHA = 41
    SH = 42
    SPARCV9 = 43
    TRICORE = 44
    ARC = 45
    H8_300 = 46
    H8_300H = 47
    H8S = 48
    H8_500 = 49
    IA_64 = 50
    MIPS_X = 51
    COLDFIRE = 52
    _68HC12 = 53
    MMA = 54
    PCP = 55
    NCPU = 56
    NDR1 = 57
    STARCORE = 58
    ME16 = 59
    ST100 = 60
    TINYJ = 61
    X86_64 = 62
    AMD64 = 62
    PDSP = 63
    PDP10 = 64
    PDP11 = 65
    FX66 = 66
    ST9PLUS = 67
    ST7 = 68
    _68HC16 = 69
    _68HC11 = 70
    _68HC08 = 71
    _68HC05 = 72
    SVX = 73
    ST19 = 74
    VAX = 75
    CRIS = 76
    JAVELIN = 77
    FIREPATH = 78
    ZSP = 79
    MMIX = 80
    HUANY = 81
    PRISM = 82
    AVR = 83
    FR30 = 84
    D10V = 85
    D30V = 86
    V850 = 87
    M32R = 88
    MN10300 = 89
    MN10200 = 90
    PJ = 91
    OPENRISC = 92
    ARC_A5 = 93
    XTENSA = 94
    VIDEOCORE = 95
    TMM_GPP = 96
    NS32K = 97
    TPC = 98
    SNP1K = 99
    ST200 = 100
    MSP430 = 105
    BLACKFIN = 106
    ALTERA_NIOS2 = 113
    TI_C6000 = 140
    AARCH64 = 183
    AVR32 = 185
    TILEPRO = 188
    MICROBLAZE = 189
    CUDA = 190
    TILEGX = 191
    Z80 = 220
    AMDGPU = 224
    RISCV = 243
    BPF = 247
    CSKY = 252
    LOONGARCH = 258
