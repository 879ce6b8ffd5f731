"""
MIDI manufacturer System Exclusive ID table.

Standard IDs are a single byte (0x01-0x7F). Extended IDs are three bytes,
0x00 followed by two more. Not all IDs are listed; the assignments have
holes and the table only carries the well-known ones.
"""

from typing import Dict, List, Tuple

# Key is the raw ID as a tuple of byte values
MANUFACTURER_IDS: Dict[Tuple[int, ...], str] = {
    # American group
    (0x01,): "Sequential",
    (0x02,): "IDP",
    (0x03,): "Voyetra/Octave-Plateau",
    (0x04,): "Moog",
    (0x05,): "Passport Designs",
    (0x06,): "Lexicon",
    (0x07,): "Kurzweil",
    (0x08,): "Fender",
    (0x09,): "Gulbransen",
    (0x0A,): "AKG Acoustics",
    (0x0B,): "Voyce Music",
    (0x0C,): "Waveframe Corp",
    (0x0D,): "ADA Signal Processors",
    (0x0E,): "Garfield Electronics",
    (0x0F,): "Ensoniq",
    (0x10,): "Oberheim",
    (0x11,): "Apple Computer",
    (0x12,): "Grey Matter Response",
    (0x13,): "Digidesign",
    (0x14,): "Palm Tree Instruments",
    (0x15,): "JLCooper Electronics",
    (0x16,): "Lowrey",
    (0x17,): "Adams-Smith",
    (0x18,): "Emu Systems",
    (0x19,): "Harmony Systems",
    (0x1A,): "ART",
    (0x1B,): "Baldwin",
    (0x1C,): "Eventide",
    (0x1D,): "Inventronics",
    (0x1F,): "Clarity",

    (0x00, 0x00, 0x01): "Time Warner Interactive",
    (0x00, 0x00, 0x07): "Digital Music Corp.",
    (0x00, 0x00, 0x08): "IOTA Systems",
    (0x00, 0x00, 0x09): "New England Digital",
    (0x00, 0x00, 0x0A): "Artisyn",
    (0x00, 0x00, 0x0B): "IVL Technologies",
    (0x00, 0x00, 0x0C): "Southern Music Systems",
    (0x00, 0x00, 0x0D): "Lake Butler Sound Company",
    (0x00, 0x00, 0x0E): "Alesis",
    (0x00, 0x00, 0x10): "DOD Electronics",
    (0x00, 0x00, 0x11): "Studer-Editech",
    (0x00, 0x00, 0x14): "Perfect Fretworks",
    (0x00, 0x00, 0x15): "KAT",
    (0x00, 0x00, 0x16): "Opcode",
    (0x00, 0x00, 0x17): "Rane Corp.",
    (0x00, 0x00, 0x18): "Anadi Inc.",
    (0x00, 0x00, 0x19): "KMX",
    (0x00, 0x00, 0x1A): "Allen & Heath Brenell",
    (0x00, 0x00, 0x1B): "Peavy Electronics",
    (0x00, 0x00, 0x1C): "360 Systems",
    (0x00, 0x00, 0x1D): "Spectrum Design and Development",
    (0x00, 0x00, 0x1E): "Marquis Music",
    (0x00, 0x00, 0x1F): "Zeta Systems",

    (0x00, 0x00, 0x20): "Axxes",
    (0x00, 0x00, 0x21): "Orban",
    (0x00, 0x00, 0x24): "KTI",
    (0x00, 0x00, 0x25): "Breakaway Technologies",
    (0x00, 0x00, 0x26): "CAE",
    (0x00, 0x00, 0x29): "Rocktron Corp.",
    (0x00, 0x00, 0x2A): "PianoDisc",
    (0x00, 0x00, 0x2B): "Cannon Research Group",
    (0x00, 0x00, 0x2D): "Rogers Instrument Corp.",
    (0x00, 0x00, 0x2E): "Blue Sky Logic",
    (0x00, 0x00, 0x2F): "Encore Electronics",

    (0x00, 0x00, 0x30): "Uptown",
    (0x00, 0x00, 0x31): "Voce",
    (0x00, 0x00, 0x32): "CTI Audio, Inc. (Music. Intel Dev.)",
    (0x00, 0x00, 0x33): "S&S Research",
    (0x00, 0x00, 0x34): "Broderbund Software, Inc.",
    (0x00, 0x00, 0x35): "Allen Organ Co.",
    (0x00, 0x00, 0x37): "Music Quest",
    (0x00, 0x00, 0x38): "APHEX",
    (0x00, 0x00, 0x39): "Gallien Krueger",
    (0x00, 0x00, 0x3A): "IBM",
    (0x00, 0x00, 0x3C): "Hotz Instruments Technologies",
    (0x00, 0x00, 0x3D): "ETA Lighting",
    (0x00, 0x00, 0x3E): "NSI Corporation",
    (0x00, 0x00, 0x3F): "Ad Lib, Inc.",

    (0x00, 0x00, 0x40): "Richmond Sound Design",
    (0x00, 0x00, 0x41): "Microsoft",
    (0x00, 0x00, 0x42): "The Software Toolworks",
    (0x00, 0x00, 0x43): "Niche/RJMG",
    (0x00, 0x00, 0x44): "Intone",
    (0x00, 0x00, 0x47): "GT Electronics / Groove Tubes",
    (0x00, 0x00, 0x49): "Timeline Vista",
    (0x00, 0x00, 0x4A): "Mesa Boogie",
    (0x00, 0x00, 0x4C): "Sequoia Development",
    (0x00, 0x00, 0x4D): "Studio Electronics",
    (0x00, 0x00, 0x4E): "Euphonix",
    (0x00, 0x00, 0x4F): "InterMIDI, Inc.",

    (0x00, 0x00, 0x50): "MIDI Solutions",
    (0x00, 0x00, 0x51): "3DO Company",
    (0x00, 0x00, 0x52): "Lightwave Research",
    (0x00, 0x00, 0x53): "Micro-W",
    (0x00, 0x00, 0x54): "Spectral Synthesis",
    (0x00, 0x00, 0x55): "Lone Wolf",
    (0x00, 0x00, 0x56): "Studio Technologies",
    (0x00, 0x00, 0x57): "Peterson EMP",
    (0x00, 0x00, 0x58): "Atari",
    (0x00, 0x00, 0x59): "Marion Systems",
    (0x00, 0x00, 0x5A): "Design Event",
    (0x00, 0x00, 0x5B): "Winjammer Software",
    (0x00, 0x00, 0x5C): "AT&T Bell Labs",
    (0x00, 0x00, 0x5E): "Symetrix",
    (0x00, 0x00, 0x5F): "MIDI the World",

    (0x00, 0x00, 0x60): "Desper Products",
    (0x00, 0x00, 0x61): "Micros'N MIDI",
    (0x00, 0x00, 0x62): "Accordians Intl",
    (0x00, 0x00, 0x63): "EuPhonics",
    (0x00, 0x00, 0x64): "Musonix",
    (0x00, 0x00, 0x65): "Turtle Beach Systems",
    (0x00, 0x00, 0x66): "Mackie Designs",
    (0x00, 0x00, 0x67): "Compuserve",
    (0x00, 0x00, 0x68): "BES Technologies",
    (0x00, 0x00, 0x69): "QRS Music Rolls",
    (0x00, 0x00, 0x6A): "P G Music",
    (0x00, 0x00, 0x6B): "Sierra Semiconductor",
    (0x00, 0x00, 0x6C): "EpiGraf Audio Visual",
    (0x00, 0x00, 0x6D): "Electronics Deiversified",
    (0x00, 0x00, 0x6E): "Tune 1000",
    (0x00, 0x00, 0x6F): "Advanced Micro Devices",

    (0x00, 0x00, 0x70): "Mediamation",
    (0x00, 0x00, 0x71): "Sabine Music",
    (0x00, 0x00, 0x72): "Woog Labs",
    (0x00, 0x00, 0x73): "Micropolis",
    (0x00, 0x00, 0x74): "Ta Horng Musical Inst.",
    (0x00, 0x00, 0x75): "eTek (formerly Forte)",
    (0x00, 0x00, 0x76): "Electrovoice",
    (0x00, 0x00, 0x77): "Midisoft",
    (0x00, 0x00, 0x78): "Q-Sound Labs",
    (0x00, 0x00, 0x79): "Westrex",
    (0x00, 0x00, 0x7A): "NVidia",
    (0x00, 0x00, 0x7B): "ESS Technology",
    (0x00, 0x00, 0x7C): "MediaTrix Peripherals",
    (0x00, 0x00, 0x7D): "Brooktree",
    (0x00, 0x00, 0x7E): "Otari",
    (0x00, 0x00, 0x7F): "Key Electronics",

    (0x00, 0x01, 0x01): "Crystalake Multimedia",
    (0x00, 0x01, 0x02): "Crystal Semiconductor",
    (0x00, 0x01, 0x03): "Rockwell Semiconductor",
    (0x00, 0x01, 0x0C): "Line 6",

    # European group
    (0x20,): "Passac",
    (0x21,): "SIEL",
    (0x22,): "Synthaxe",
    (0x24,): "Hohner",
    (0x25,): "Twister",
    (0x26,): "Solton",
    (0x27,): "Jellinghaus MS",
    (0x28,): "Southworth Music Systems",
    (0x29,): "PPG",
    (0x2A,): "JEN",
    (0x2B,): "SSL Limited",
    (0x2C,): "Audio Veritrieb",
    (0x2F,): "Elka",

    (0x30,): "Dynacord",
    (0x31,): "Viscount",
    (0x33,): "Clavia Digital Instruments",
    (0x34,): "Audio Architecture",
    (0x35,): "GeneralMusic Corp.",
    (0x39,): "Soundcraft Electronics",
    (0x3B,): "Wersi",
    (0x3C,): "Avab Elektronik Ab",
    (0x3D,): "Digigram",
    (0x3E,): "Waldorf Electronics",
    (0x3F,): "Quasimidi",

    (0x00, 0x20, 0x00): "Dream",
    (0x00, 0x20, 0x01): "Strand Lighting",
    (0x00, 0x20, 0x02): "Amek Systems",
    (0x00, 0x20, 0x04): "Böhm Electronic",
    (0x00, 0x20, 0x06): "Trident Audio",
    (0x00, 0x20, 0x07): "Real World Studio",
    (0x00, 0x20, 0x09): "Yes Technology",
    (0x00, 0x20, 0x0A): "Audiomatica",
    (0x00, 0x20, 0x0B): "Bontempi/Farfisa",
    (0x00, 0x20, 0x0C): "F.B.T. Elettronica",
    (0x00, 0x20, 0x0D): "MidiTemp",
    (0x00, 0x20, 0x0E): "LA Audio (Larking Audio)",
    (0x00, 0x20, 0x0F): "Zero 88 Lighting Limited",

    (0x00, 0x20, 0x10): "Micon Audio Electronics GmbH",
    (0x00, 0x20, 0x11): "Forefront Technology",
    (0x00, 0x20, 0x13): "Kenton Electronics",
    (0x00, 0x20, 0x15): "ADB",
    (0x00, 0x20, 0x16): "Marshall Products",
    (0x00, 0x20, 0x17): "DDA",
    (0x00, 0x20, 0x18): "BSS",
    (0x00, 0x20, 0x19): "MA Lighting Technology",
    (0x00, 0x20, 0x1A): "Fatar",
    (0x00, 0x20, 0x1B): "QSC Audio",
    (0x00, 0x20, 0x1C): "Artisan Classic Organ",
    (0x00, 0x20, 0x1D): "Orla Spa",
    (0x00, 0x20, 0x1E): "Pinnacle Audio",
    (0x00, 0x20, 0x1F): "TC Electronics",

    (0x00, 0x20, 0x20): "Doepfer Musikelektronik",
    (0x00, 0x20, 0x21): "Creative Technology Pte",
    (0x00, 0x20, 0x22): "Minami/Seiyddo",
    (0x00, 0x20, 0x23): "Goldstar",
    (0x00, 0x20, 0x24): "Midisoft s.a.s di M. Cima",
    (0x00, 0x20, 0x25): "Samick",
    (0x00, 0x20, 0x26): "Penny and Giles",
    (0x00, 0x20, 0x27): "Acorn Computer",
    (0x00, 0x20, 0x28): "LSC Electronics",
    (0x00, 0x20, 0x29): "Novation EMS",
    (0x00, 0x20, 0x2A): "Samkyung Mechatronics",
    (0x00, 0x20, 0x2B): "Medeli Electronics",
    (0x00, 0x20, 0x2C): "Charlie Lab",
    (0x00, 0x20, 0x2D): "Blue Chip Music Tech",
    (0x00, 0x20, 0x2E): "BEE OH Corp",
    (0x00, 0x20, 0x32): "Behringer",
    (0x00, 0x20, 0x33): "Access Music Electronics",
    (0x00, 0x20, 0x3C): "Elektron",
    (0x00, 0x20, 0x6B): "Arturia",
    (0x00, 0x21, 0x09): "Native Instruments",

    # Japanese group
    (0x40,): "Kawai",
    (0x41,): "Roland",
    (0x42,): "Korg",
    (0x43,): "Yamaha",
    (0x44,): "Casio",
    (0x46,): "Kamiya Studio",
    (0x47,): "Akai",
    (0x48,): "Japan Victor",
    (0x49,): "Mesosha",
    (0x4A,): "Hoshino Gakki",
    (0x4B,): "Fujitsu Elect",
    (0x4C,): "Sony",
    (0x4D,): "Nisshin Onpa",
    (0x4E,): "TEAC",
    (0x50,): "Matsushita Electric",
    (0x51,): "Fostex",
    (0x52,): "Zoom",
    (0x53,): "Midori Electronics",
    (0x54,): "Matsushita Communication Industrial",
    (0x55,): "Suzuki Musical Inst. Mfg.",

    # Special
    (0x7D,): "Non-Commercial",
    (0x7E,): "Universal Non-Real Time",
    (0x7F,): "Universal Real Time",
}

# Group boundaries, inclusive. Standard IDs are classified by their only
# byte, extended IDs by the byte following the 0x00 marker.
STANDARD_GROUP_RANGES: List[Tuple[int, int, str]] = [
    (0x01, 0x1F, "American"),
    (0x20, 0x3F, "European"),
    (0x40, 0x5F, "Japanese"),
    (0x60, 0x7C, "Other"),
    (0x7D, 0x7F, "Special"),
]

EXTENDED_GROUP_RANGES: List[Tuple[int, int, str]] = [
    (0x00, 0x1F, "American"),
    (0x20, 0x3F, "European"),
    (0x40, 0x5F, "Japanese"),
    (0x60, 0x7F, "Other"),
]
