from parser.normalizer import is_noise, normalize_lines


def test_empty_input():
    assert normalize_lines("") == []


def test_indices_kept_and_noise_dropped():
    raw = "Page 1 of 3\n\nBeginning Balance $10.00\nDEPOSITS & CREDITS\nshort\n08/26 Payment  90.93\n"
    lines = normalize_lines(raw)
    assert [(l.index, l.text) for l in lines] == [
        (3, "DEPOSITS & CREDITS"),
        (5, "08/26 Payment 90.93"),
    ]


def test_whitespace_collapsed():
    lines = normalize_lines("08/26\t\tOliver    Ollesch   90.93")
    assert lines[0].text == "08/26 Oliver Ollesch 90.93"


def test_noise_markers():
    assert is_noise("ACCOUNT SUMMARY")
    assert is_noise("Ending Balance on 08/31 $2,517.96")
    assert is_noise("3 of 7")
    assert not is_noise("Total Withdrawals $1,368.60")
    assert not is_noise("WITHDRAWALS")
    assert is_noise("LIFEGREEN CHECKING", extra_prefixes=("lifegreen",))
