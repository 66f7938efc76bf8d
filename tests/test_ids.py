import pytest

from id3kit.ids import V23_COMMON_IDS, V24_COMMON_IDS, common_id, must_frame_be_in_sequence


@pytest.mark.parametrize(
    "description, version, expected",
    [
        ("Title", 4, "TIT2"),
        ("Artist", 3, "TPE1"),
        ("Genre", 4, "TCON"),
        ("Year", 3, "TYER"),
        ("Year", 4, "TDRC"),
        ("Original release year", 3, "TORY"),
        ("Original release year", 4, "TDOR"),
        ("Size", 3, "TSIZ"),
        ("Size", 4, ""),
        ("Mood", 4, "TMOO"),
        ("Attached picture", 3, "APIC"),
        ("Date", 3, "TDAT"),
        ("Date", 4, "TDRC"),
        ("Comments", 4, "COMM"),
    ],
)
def test_common_id_known_descriptions(description, version, expected):
    assert common_id(description, version) == expected


def test_common_id_unknown_description_is_returned_unchanged():
    assert common_id("WPUB", 4) == "WPUB"
    assert common_id("Something else", 3) == "Something else"


def test_common_id_uses_v24_table_for_other_versions():
    assert common_id("Mood", 2) == "TMOO"
    assert common_id("Mood", 3) == "Mood"


@pytest.mark.parametrize("version, table", [(3, V23_COMMON_IDS), (4, V24_COMMON_IDS)])
def test_common_id_gives_four_character_ids(version, table):
    for description in table:
        frame_id = common_id(description, version)
        assert frame_id == "" or len(frame_id) == 4, description


@pytest.mark.parametrize(
    "frame_id, expected",
    [
        ("TIT2", False),
        ("TPE1", False),
        ("TXXX", True),
        ("COMM", True),
        ("APIC", True),
        ("USLT", True),
        ("IPLS", False),
        ("RVAD", False),
        ("MCDI", True),
        ("WPUB", True),
    ],
)
def test_must_frame_be_in_sequence(frame_id, expected):
    assert must_frame_be_in_sequence(frame_id) is expected