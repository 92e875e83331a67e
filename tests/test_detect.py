from kennitala.detect import detect_file, iter_kennitala_spans

def test_iter_spans_basic():
    txt = "Kt. 010190-2079 og fyrirtæki 550305 0030, rangt: 1234567890, sími 5551234."
    spans = list(iter_kennitala_spans(txt))
    assert [s.digits for s in spans] == ["0101902079", "5503050030", "1234567890"]
    a, b, c = spans
    assert a.is_valid and a.type == "person" and a.formatted == "010190-2079"
    assert txt[a.start:a.end] == a.raw == "010190-2079"
    assert b.is_valid and b.type == "company"
    assert not c.is_valid

def test_not_part_of_longer_number():
    assert list(iter_kennitala_spans("IS1201019020790")) == []

def test_temporary_span():
    s = list(iter_kennitala_spans("kerfiskennitala 801234-5678"))[0]
    assert s.is_valid and s.temporary

def test_detect_file(tmp_path):
    p = tmp_path / "in.txt"
    p.write_text("010190–2079\n", encoding="utf-8")
    spans = detect_file(str(p))
    assert len(spans) == 1 and spans[0].digits == "0101902079"
