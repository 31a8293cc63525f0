from simplecolumns.columns.classifier import Action, TagScan, classify


def test_plain_text_is_skipped():
    assert classify("just a paragraph\nand another") is Action.SKIP


def test_open_block_accumulates():
    assert classify("[begin]\nleft side") is Action.ACCUMULATE


def test_closed_block_renders():
    assert classify("[begin]2\nleft\n[col]\nright\n[end] wrap") is Action.RENDER


def test_end_without_begin_is_skipped():
    assert classify("text\n[end]") is Action.SKIP


def test_repeated_begin_is_skipped():
    assert classify("[begin]\n[begin]\n[end]") is Action.SKIP


def test_repeated_end_is_skipped():
    assert classify("[begin]\n[end]\n[end]") is Action.SKIP


def test_repeated_begin_stops_the_scan():
    # A later duplicate [end] cannot turn the outcome back into a render
    assert classify("[begin]\n[begin]\n[end]\n[end]") is Action.SKIP


def test_tags_must_start_the_line():
    assert classify("see [begin] and [end]") is Action.SKIP


def test_scan_carries_state_across_fragments():
    scan = TagScan()
    assert scan.feed("[begin]2\nLeft") is Action.ACCUMULATE
    assert scan.feed("more left") is Action.ACCUMULATE
    assert scan.feed("[col]\nRight\n[end]") is Action.RENDER


def test_scan_records_end_config():
    scan = TagScan()
    scan.feed("[begin]")
    scan.feed("[end] wrap rtl")

    assert scan.config.wrap
    assert scan.config.rtl


def test_bare_end_gives_empty_config():
    scan = TagScan()
    scan.feed("[begin]\n[end]")
    assert scan.config.text == ""


def test_malformed_scan_stays_skipped():
    scan = TagScan()
    scan.feed("[begin]")
    assert scan.feed("[begin]") is Action.SKIP
    # Later text is not scanned any more
    assert scan.feed("[end]") is Action.SKIP
    assert not scan.seen_end
