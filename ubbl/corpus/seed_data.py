"""Embedded clause corpus: a curated subset of the Uniform Building By-Laws 1984.

Bilingual (English / Bahasa Melayu) text with applicability and evaluation
rules.  Thresholds follow UBBL 1984 as amended and the Seventh Schedule.
"""

from __future__ import annotations

from typing import Any

from ubbl.corpus.models import Applicability, Clause, ClauseText, RuleCheck

ALL_TYPES = [
    "residential",
    "commercial",
    "industrial",
    "institutional",
    "mixed-use",
    "assembly",
]

_PARTS: dict[int, dict[str, str]] = {
    1: {"en": "PRELIMINARY", "ms": "PERMULAAN"},
    2: {"en": "SUBMISSION OF PLANS FOR APPROVAL", "ms": "PENYERAHAN PELAN UNTUK KELULUSAN"},
    3: {"en": "SPACE, LIGHT AND VENTILATION", "ms": "RUANG, CAHAYA DAN PENGUDARAAN"},
    5: {"en": "STRUCTURAL REQUIREMENTS", "ms": "KEHENDAK STRUKTUR"},
    7: {"en": "FIRE REQUIREMENTS", "ms": "KEHENDAK MENCEGAH KEBAKARAN"},
    8: {"en": "FIRE ALARMS, FIRE DETECTION, FIRE EXTINGUISHMENT AND FIRE FIGHTING ACCESS",
        "ms": "PENGGERA KEBAKARAN, PENGESANAN KEBAKARAN, PEMADAMAN KEBAKARAN DAN LALUAN MEMADAM KEBAKARAN"},
    9: {"en": "MISCELLANEOUS", "ms": "PELBAGAI"},
}


def _clause(
    number: str,
    part: int,
    category: str,
    title_en: str,
    title_ms: str,
    content_en: str,
    content_ms: str,
    **extra: Any,
) -> Clause:
    return Clause(
        id=f"ubbl-{number.lower()}",
        number=number,
        part_number=part,
        part_title=_PARTS[part],
        text={
            "en": ClauseText(title=title_en, content=content_en),
            "ms": ClauseText(title=title_ms, content=content_ms),
        },
        category=category,
        **extra,
    )


SEED_CLAUSES: list[Clause] = [
    # -- Part I: Preliminary -------------------------------------------------
    _clause(
        "1", 1, "general",
        "Citation", "Nama",
        "These By-laws may be cited as the Uniform Building By-laws 1984.",
        "Undang-undang kecil ini boleh dinamakan Undang-undang Kecil Bangunan Seragam 1984.",
        tags=["administrative"],
        keywords=["citation", "title"],
        priority="low",
        related_clauses=["ubbl-2"],
        effective_date="1984-02-29",
    ),
    _clause(
        "2", 1, "general",
        "Interpretation", "Tafsiran",
        "In these By-laws, unless the context otherwise requires, terms such as "
        "'building', 'storey' and 'habitable room' have the meanings assigned.",
        "Dalam Undang-undang kecil ini, melainkan jika konteksnya menghendaki makna "
        "yang lain, istilah seperti 'bangunan', 'tingkat' dan 'bilik kediaman' "
        "mempunyai makna yang diberikan.",
        tags=["administrative", "definitions"],
        keywords=["definition", "storey", "habitable room"],
        priority="medium",
        complexity=2,
        effective_date="1984-02-29",
    ),
    # -- Part II: Submission of plans ---------------------------------------
    _clause(
        "3", 2, "submission",
        "Submission of plans for approval", "Penyerahan pelan untuk kelulusan",
        "All plans for the erection of a building shall be submitted to the local "
        "authority by a submitting person.",
        "Semua pelan bagi mendirikan bangunan hendaklah diserahkan kepada pihak "
        "berkuasa tempatan oleh orang yang mengemukakan.",
        tags=["submission", "approval"],
        keywords=["plans", "local authority", "submitting person"],
        priority="high",
        complexity=2,
        effective_date="1984-02-29",
    ),
    _clause(
        "10", 2, "submission",
        "Plans to be signed", "Pelan hendaklah ditandatangani",
        "All plans submitted shall be signed by the owner and the qualified person "
        "who prepared them.",
        "Semua pelan yang diserahkan hendaklah ditandatangani oleh pemilik dan orang "
        "berkelayakan yang menyediakannya.",
        tags=["submission"],
        keywords=["signature", "qualified person"],
        priority="medium",
        effective_date="1984-02-29",
    ),
    _clause(
        "25", 2, "submission",
        "Certificate of completion and compliance", "Perakuan siap dan pematuhan",
        "No person shall occupy a building unless a certificate of completion and "
        "compliance has been issued by the principal submitting person.",
        "Tiada seorang pun boleh menduduki bangunan melainkan perakuan siap dan "
        "pematuhan telah dikeluarkan oleh orang utama yang mengemukakan.",
        tags=["submission", "occupation", "ccc"],
        keywords=["CCC", "occupation", "completion"],
        priority="critical",
        complexity=3,
        effective_date="2007-04-12",
    ),
    # -- Part III: Space, light and ventilation ------------------------------
    _clause(
        "33", 3, "spatial",
        "Open space about buildings", "Ruang lapang sekeliling bangunan",
        "Every building shall be set back from the road reserve and from the rear "
        "and side boundaries by the minimum distances required.",
        "Setiap bangunan hendaklah dianjakkan dari rizab jalan dan dari sempadan "
        "belakang dan sisi mengikut jarak minimum yang dikehendaki.",
        tags=["setback", "planning"],
        keywords=["setback", "boundary", "road reserve"],
        priority="high",
        complexity=2,
        applicability=Applicability(building_types=["residential", "commercial", "mixed-use"]),
        checks=[
            RuleCheck(
                check_id="front_setback", check_type="min_value", attribute="setback_front",
                threshold=6.0, unit="m", severity="major",
                description="Front setback of {actual}{unit} is below the {required}{unit} minimum",
                remediation="Increase front setback to at least {required}{unit} from the road reserve; current {actual}{unit}",
            ),
            RuleCheck(
                check_id="rear_setback", check_type="min_value", attribute="setback_rear",
                threshold=3.0, unit="m", severity="major",
                description="Rear setback of {actual}{unit} is below the {required}{unit} minimum",
                remediation="Increase rear setback to at least {required}{unit}; current {actual}{unit}",
            ),
            RuleCheck(
                check_id="side_setback", check_type="min_value", attribute="setback_side",
                threshold=1.5, unit="m", severity="minor",
                description="Side setback of {actual}{unit} is below the {required}{unit} minimum",
                remediation="Increase side setback to at least {required}{unit}; current {actual}{unit}",
            ),
        ],
        effective_date="1984-02-29",
    ),
    _clause(
        "34A", 3, "accessibility",
        "Facilities for disabled persons", "Kemudahan untuk orang kurang upaya",
        "Buildings to which the public has access shall provide facilities and "
        "access for disabled persons in accordance with MS 1184.",
        "Bangunan yang boleh dimasuki orang awam hendaklah menyediakan kemudahan dan "
        "laluan untuk orang kurang upaya mengikut MS 1184.",
        tags=["accessibility", "oku", "ms1184"],
        keywords=["disabled", "ramp", "accessible toilet"],
        priority="high",
        complexity=3,
        applicability=Applicability(
            building_types=["commercial", "institutional", "mixed-use", "assembly"],
        ),
        checks=[
            RuleCheck(
                check_id="accessible_entrance", check_type="boolean",
                attribute="accessible_entrance", threshold=True, severity="major",
                description="No barrier-free entrance is provided",
                remediation="Provide at least one barrier-free entrance with ramp access per MS 1184",
            ),
        ],
        effective_date="1991-01-01",
    ),
    _clause(
        "39", 3, "spatial",
        "Natural lighting and ventilation", "Pencahayaan dan pengudaraan semula jadi",
        "Every room shall be provided with windows with an aggregate area of not "
        "less than 10% of the clear floor area, of which at least half shall open.",
        "Setiap bilik hendaklah disediakan tingkap yang jumlah luasnya tidak kurang "
        "daripada 10% keluasan lantai, dan sekurang-kurangnya separuh boleh dibuka.",
        tags=["daylight", "ventilation"],
        keywords=["window", "opening", "natural light"],
        priority="high",
        complexity=2,
        applicability=Applicability(
            building_types=["residential", "commercial", "institutional", "mixed-use"],
        ),
        checks=[
            RuleCheck(
                check_id="window_area", check_type="min_value", attribute="window_area_pct",
                threshold=10.0, unit="%", severity="major",
                description="Window area of {actual}{unit} of floor area is below the {required}{unit} minimum",
                remediation="Increase window area to at least {required}{unit} of floor area; current {actual}{unit}",
            ),
            RuleCheck(
                check_id="openable_area", check_type="min_value", attribute="ventilation_area_pct",
                threshold=5.0, unit="%", severity="major",
                description="Openable window area of {actual}{unit} is below the {required}{unit} minimum",
                remediation="Increase openable window area to at least {required}{unit} of floor area; current {actual}{unit}",
            ),
        ],
        requires_calculation=True,
        effective_date="1984-02-29",
    ),
    _clause(
        "42", 3, "spatial",
        "Minimum area of rooms in residential buildings",
        "Keluasan minimum bilik dalam bangunan kediaman",
        "The area of the first habitable room shall be not less than 11 square "
        "metres and of the second not less than 9.3 square metres.",
        "Keluasan bilik kediaman pertama hendaklah tidak kurang daripada 11 meter "
        "persegi dan bilik kedua tidak kurang daripada 9.3 meter persegi.",
        tags=["room size"],
        keywords=["habitable room", "area"],
        priority="medium",
        applicability=Applicability(building_types=["residential", "mixed-use"]),
        effective_date="1984-02-29",
    ),
    _clause(
        "44", 3, "spatial",
        "Height of rooms in residential buildings", "Ketinggian bilik dalam bangunan kediaman",
        "The height of habitable rooms shall be not less than 2.5 metres measured "
        "from floor to ceiling.",
        "Ketinggian bilik kediaman hendaklah tidak kurang daripada 2.5 meter diukur "
        "dari lantai ke siling.",
        tags=["ceiling height"],
        keywords=["ceiling", "headroom"],
        priority="medium",
        applicability=Applicability(building_types=["residential", "commercial", "mixed-use"]),
        checks=[
            RuleCheck(
                check_id="ceiling_height", check_type="min_value", attribute="ceiling_height",
                threshold=2.5, unit="m", severity="minor",
                description="Ceiling height of {actual}{unit} is below the {required}{unit} minimum",
                remediation="Raise ceiling height to at least {required}{unit}; current {actual}{unit}",
            ),
        ],
        effective_date="1984-02-29",
    ),
    # -- Part V: Structural --------------------------------------------------
    _clause(
        "53", 5, "structural",
        "Design of buildings", "Reka bentuk bangunan",
        "Buildings shall be designed to safely sustain all dead, imposed and wind "
        "loads in accordance with the relevant standards.",
        "Bangunan hendaklah direka bentuk untuk menanggung dengan selamat semua beban "
        "mati, beban kenaan dan beban angin mengikut piawaian berkaitan.",
        tags=["loads"],
        keywords=["dead load", "imposed load", "wind"],
        priority="critical",
        complexity=4,
        applicability=Applicability(building_types=ALL_TYPES),
        requires_calculation=True,
        effective_date="1984-02-29",
    ),
    _clause(
        "70", 5, "structural",
        "Imposed floor loads", "Beban kenaan lantai",
        "Floors shall be designed for the imposed loads given in the Fifth Schedule "
        "for the intended use of the building.",
        "Lantai hendaklah direka bentuk bagi beban kenaan dalam Jadual Kelima "
        "mengikut kegunaan bangunan.",
        tags=["loads"],
        keywords=["floor load", "kN"],
        priority="high",
        complexity=4,
        applicability=Applicability(building_types=ALL_TYPES),
        requires_calculation=True,
        related_clauses=["ubbl-53"],
        effective_date="1984-02-29",
    ),
    # -- Part VII: Fire requirements -----------------------------------------
    _clause(
        "133", 7, "fire_safety",
        "Interpretation of fire requirements", "Tafsiran kehendak mencegah kebakaran",
        "In this Part, 'compartment', 'means of escape' and 'protected shaft' have "
        "the meanings assigned to them.",
        "Dalam Bahagian ini, 'petak', 'jalan keluar' dan 'syaf terlindung' mempunyai "
        "makna yang diberikan.",
        tags=["definitions", "fire"],
        keywords=["compartment", "means of escape"],
        priority="medium",
        applicability=Applicability(building_types=ALL_TYPES),
        effective_date="1984-02-29",
    ),
    _clause(
        "140", 7, "fire_safety",
        "Fire appliance access", "Laluan kenderaan bomba",
        "Buildings exceeding 18 metres in height shall have access for fire "
        "appliances to at least one face of the building.",
        "Bangunan yang melebihi 18 meter tinggi hendaklah mempunyai laluan bagi "
        "kenderaan bomba ke sekurang-kurangnya satu muka bangunan.",
        tags=["bomba", "high-rise"],
        keywords=["fire engine", "access road"],
        priority="high",
        complexity=3,
        applicability=Applicability(min_height=18.0),
        effective_date="1984-02-29",
    ),
    _clause(
        "147", 7, "fire_safety",
        "Fire resistance of structural elements", "Ketahanan api unsur struktur",
        "Elements of structure shall have fire resistance of not less than the "
        "period specified in the Ninth Schedule for the height of the building.",
        "Unsur struktur hendaklah mempunyai ketahanan api tidak kurang daripada "
        "tempoh dalam Jadual Kesembilan mengikut ketinggian bangunan.",
        tags=["fire resistance", "ninth schedule"],
        keywords=["fire rating", "FRP"],
        priority="critical",
        complexity=4,
        applicability=Applicability(building_types=ALL_TYPES),
        checks=[
            RuleCheck(
                check_id="fire_resistance", check_type="min_value",
                attribute="fire_resistance_minutes", calculator="required_fire_resistance",
                unit=" min", severity="critical",
                description="Structural fire resistance of {actual}{unit} is below the {required}{unit} required",
                remediation="Upgrade elements of structure to at least {required}{unit} fire resistance; current {actual}{unit}",
            ),
        ],
        requires_calculation=True,
        calculators=["required_fire_resistance"],
        effective_date="1984-02-29",
    ),
    _clause(
        "165", 7, "fire_safety",
        "Measurement of travel distance to exits", "Ukuran jarak perjalanan ke jalan keluar",
        "The travel distance from any point in a storey to the nearest storey exit "
        "shall not exceed the limits in the Seventh Schedule.",
        "Jarak perjalanan dari mana-mana titik dalam sesuatu tingkat ke jalan keluar "
        "tingkat terdekat tidak boleh melebihi had dalam Jadual Ketujuh.",
        tags=["means of escape", "seventh schedule"],
        keywords=["travel distance", "exit"],
        priority="critical",
        complexity=4,
        applicability=Applicability(building_types=ALL_TYPES),
        checks=[
            RuleCheck(
                check_id="travel_distance", check_type="max_value",
                attribute="travel_distance", calculator="max_travel_distance",
                unit="m", severity="critical",
                description="Travel distance of {actual}{unit} exceeds the {required}{unit} limit",
                remediation="Reduce travel distance to at most {required}{unit} by adding exits or re-planning; current {actual}{unit}",
            ),
        ],
        requires_calculation=True,
        calculators=["max_travel_distance"],
        related_clauses=["ubbl-168"],
        effective_date="1984-02-29",
    ),
    _clause(
        "166", 7, "fire_safety",
        "Exits to be accessible at all times", "Jalan keluar boleh dihampiri pada setiap masa",
        "Every staircase forming part of a means of escape shall be of a clear "
        "width not less than that required for the number of storeys served.",
        "Setiap tangga yang menjadi sebahagian jalan keluar hendaklah mempunyai "
        "lebar bersih tidak kurang daripada yang dikehendaki bagi bilangan tingkat.",
        tags=["means of escape", "staircase"],
        keywords=["staircase", "width"],
        priority="high",
        complexity=3,
        applicability=Applicability(building_types=ALL_TYPES),
        checks=[
            RuleCheck(
                check_id="staircase_width", check_type="min_value",
                attribute="staircase_width", calculator="required_staircase_width",
                unit="m", severity="major",
                description="Staircase width of {actual}{unit} is below the {required}{unit} minimum",
                remediation="Widen staircases to at least {required}{unit}; current {actual}{unit}",
            ),
        ],
        requires_calculation=True,
        calculators=["required_staircase_width", "estimated_storeys"],
        effective_date="1984-02-29",
    ),
    _clause(
        "168", 7, "fire_safety",
        "Width of exits", "Lebar jalan keluar",
        "The aggregate width of exits shall be calculated in units of exit width of "
        "550 mm according to the occupancy load of the storey.",
        "Jumlah lebar jalan keluar hendaklah dikira dalam unit lebar jalan keluar "
        "550 mm mengikut beban penghunian tingkat.",
        tags=["means of escape", "egress", "assembly"],
        keywords=["exit width", "unit of exit width", "occupancy load"],
        priority="critical",
        complexity=5,
        applicability=Applicability(min_occupancy=50),
        checks=[
            RuleCheck(
                check_id="exit_width", check_type="min_value",
                attribute="exit_width", calculator="required_exit_width",
                unit="m", severity="critical",
                description="Exit width of {actual}{unit} is undersized for the occupancy; {required}{unit} required",
                remediation="Increase exit width to at least {required}{unit}; current {actual}{unit}",
            ),
        ],
        requires_calculation=True,
        calculators=["required_exit_width"],
        related_clauses=["ubbl-165", "ubbl-169"],
        effective_date="1984-02-29",
    ),
    _clause(
        "169", 7, "fire_safety",
        "Exit route", "Laluan keluar",
        "No storey having an occupancy load of 50 persons or more shall have less "
        "than two separate exits.",
        "Tiada tingkat yang mempunyai beban penghunian 50 orang atau lebih boleh "
        "mempunyai kurang daripada dua jalan keluar berasingan.",
        tags=["means of escape", "assembly"],
        keywords=["number of exits", "exit route"],
        priority="critical",
        complexity=3,
        applicability=Applicability(min_occupancy=50),
        checks=[
            RuleCheck(
                check_id="exit_count", check_type="min_value",
                attribute="fire_exits", calculator="required_exit_count",
                severity="critical",
                description="{actual} exits provided; {required} required for the occupancy load",
                remediation="Provide at least {required} separate exits; current {actual}",
            ),
        ],
        requires_calculation=True,
        calculators=["required_exit_count"],
        effective_date="1984-02-29",
    ),
    _clause(
        "174", 7, "fire_safety",
        "Arrangement of storey exits", "Susunan jalan keluar tingkat",
        "Where two or more storey exits are required they shall be spaced as remote "
        "from each other as practicable.",
        "Jika dua atau lebih jalan keluar tingkat dikehendaki, ia hendaklah "
        "dijarakkan sejauh yang boleh antara satu sama lain.",
        tags=["means of escape"],
        keywords=["remote exits"],
        priority="high",
        complexity=2,
        applicability=Applicability(min_occupancy=50),
        effective_date="1984-02-29",
    ),
    _clause(
        "175", 7, "fire_safety",
        "Calculation of occupancy load", "Pengiraan beban penghunian",
        "The occupancy load of a building shall not exceed its floor area divided "
        "by the area per person given in the Fifth Schedule for its use.",
        "Beban penghunian bangunan tidak boleh melebihi keluasan lantai dibahagi "
        "dengan keluasan bagi setiap orang dalam Jadual Kelima mengikut kegunaannya.",
        tags=["occupancy", "fifth schedule"],
        keywords=["occupancy load", "area per person"],
        priority="high",
        complexity=3,
        applicability=Applicability(building_types=ALL_TYPES),
        checks=[
            RuleCheck(
                check_id="occupancy_load", check_type="max_value",
                attribute="occupancy", calculator="design_occupant_load",
                unit=" persons", severity="major",
                description="Occupancy of {actual}{unit} exceeds the design load of {required}{unit}",
                remediation="Reduce occupancy to at most {required}{unit} or increase floor area; current {actual}{unit}",
            ),
        ],
        requires_calculation=True,
        calculators=["design_occupant_load"],
        effective_date="1984-02-29",
    ),
    # -- Part VIII: Fire alarms and fire fighting ----------------------------
    _clause(
        "225", 8, "fire_safety",
        "Detecting and extinguishing fire", "Pengesanan dan pemadaman kebakaran",
        "Every building exceeding 18 metres in height shall be provided with an "
        "automatic sprinkler system approved by the Fire Authority.",
        "Setiap bangunan yang melebihi 18 meter tinggi hendaklah dilengkapi sistem "
        "pemercik automatik yang diluluskan oleh Pihak Berkuasa Bomba.",
        tags=["bomba", "sprinkler", "high-rise"],
        keywords=["sprinkler", "fire detection"],
        priority="critical",
        complexity=3,
        applicability=Applicability(min_height=18.0),
        checks=[
            RuleCheck(
                check_id="sprinklers", check_type="boolean", attribute="has_sprinklers",
                threshold=True, severity="critical",
                description="High-rise building has no automatic sprinkler system",
                remediation="Install an automatic sprinkler system approved by BOMBA",
            ),
        ],
        effective_date="1984-02-29",
    ),
    _clause(
        "229", 8, "fire_safety",
        "Fire lifts", "Lif bomba",
        "In buildings exceeding 18 metres above fire appliance access level, fire "
        "lifts shall be provided so that no part of a floor is more than 61 metres "
        "from a fire lift.",
        "Dalam bangunan yang melebihi 18 meter di atas aras laluan kenderaan bomba, "
        "lif bomba hendaklah disediakan supaya tiada bahagian lantai lebih 61 meter "
        "dari lif bomba.",
        tags=["bomba", "high-rise", "lift"],
        keywords=["fire lift", "fireman lift"],
        priority="critical",
        complexity=3,
        applicability=Applicability(min_height=18.0),
        effective_date="1984-02-29",
    ),
    _clause(
        "231", 8, "services",
        "Dry rising systems", "Sistem paip naik kering",
        "Buildings in which the topmost floor is more than 18 metres but less than "
        "30 metres above fire appliance access level shall have dry rising systems.",
        "Bangunan yang tingkat teratasnya lebih 18 meter tetapi kurang 30 meter di "
        "atas aras laluan kenderaan bomba hendaklah mempunyai sistem paip naik kering.",
        tags=["bomba", "riser"],
        keywords=["dry riser"],
        priority="high",
        complexity=2,
        applicability=Applicability(min_height=18.0, max_height=30.0),
        effective_date="1984-02-29",
    ),
    _clause(
        "232", 8, "services",
        "Wet rising systems", "Sistem paip naik basah",
        "Buildings in which the topmost floor is 30 metres or more above fire "
        "appliance access level shall have wet rising systems.",
        "Bangunan yang tingkat teratasnya 30 meter atau lebih di atas aras laluan "
        "kenderaan bomba hendaklah mempunyai sistem paip naik basah.",
        tags=["bomba", "riser", "high-rise"],
        keywords=["wet riser", "hose reel"],
        priority="high",
        complexity=2,
        applicability=Applicability(min_height=30.0),
        effective_date="1984-02-29",
    ),
    # -- Part IX: Miscellaneous ----------------------------------------------
    _clause(
        "38A", 9, "environmental",
        "Energy efficiency in buildings", "Kecekapan tenaga dalam bangunan",
        "New non-residential buildings with air-conditioned space of 4000 square "
        "metres and above shall be designed to meet MS 1525 for OTTV and RTTV.",
        "Bangunan bukan kediaman baharu dengan ruang berhawa dingin 4000 meter "
        "persegi dan ke atas hendaklah direka bentuk memenuhi MS 1525 bagi OTTV dan RTTV.",
        tags=["energy", "ms1525", "green"],
        keywords=["OTTV", "RTTV", "energy efficiency"],
        priority="medium",
        complexity=4,
        applicability=Applicability(
            building_types=["commercial", "institutional", "mixed-use"],
            min_floor_area=4000.0,
        ),
        requires_calculation=True,
        effective_date="2012-09-01",
    ),
    _clause(
        "124", 9, "services",
        "Lifts", "Lif",
        "Non-residential buildings exceeding four storeys shall be provided with "
        "lifts.",
        "Bangunan bukan kediaman yang melebihi empat tingkat hendaklah disediakan lif.",
        tags=["lift", "vertical transport"],
        keywords=["lift", "elevator"],
        priority="medium",
        complexity=2,
        applicability=Applicability(
            building_types=["commercial", "industrial", "institutional", "mixed-use", "assembly"],
            min_height=15.0,
        ),
        effective_date="1984-02-29",
    ),
    _clause(
        "Parking", 9, "spatial",
        "Parking provision", "Peruntukan tempat letak kereta",
        "Off-street parking shall be provided at one space for every dwelling unit "
        "in residential buildings and one space for every 25 square metres of gross "
        "floor area in commercial buildings.",
        "Tempat letak kereta luar jalan hendaklah disediakan sebanyak satu petak bagi "
        "setiap unit kediaman dalam bangunan kediaman dan satu petak bagi setiap 25 "
        "meter persegi keluasan lantai kasar dalam bangunan komersial.",
        tags=["parking", "vehicles"],
        keywords=["parking spaces", "car park", "dwelling unit"],
        priority="medium",
        complexity=2,
        applicability=Applicability(building_types=["residential", "commercial"]),
        checks=[
            RuleCheck(
                check_id="parking_spaces", check_type="min_value",
                attribute="parking_spaces", calculator="required_parking_spaces",
                unit=" spaces", severity="major",
                description="{actual}{unit} provided; {required}{unit} required",
                remediation="Provide at least {required} parking spaces; current {actual}",
            ),
        ],
        requires_calculation=True,
        calculators=["required_parking_spaces"],
    ),
]
