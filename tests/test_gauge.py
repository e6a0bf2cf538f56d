import pytest

import ringscore
from ringscore.errors import InvalidConfiguration, MissingContainer, MissingDependency, MissingScoreData
from ringscore.surface import Document, MarkupNode, SvgSurface

SCORES = {"nutrition": 33, "physical": 0, "lifestyle": 0, "mental": 0, "total": 25}


@pytest.fixture
def document():
    return Document("canvas", "other")


def test_init_defaults(document):
    gauge = ringscore.init(document=document)
    assert gauge.canvas.container_id == "canvas"
    assert gauge.canvas.resolved_size == 300
    assert isinstance(gauge.surface, SvgSurface)
    assert not gauge.redraw
    assert document.get("canvas").children == []


def test_draw_without_scores(document):
    gauge = ringscore.init(document=document)
    with pytest.raises(MissingScoreData):
        gauge.draw()


def test_zero_size_rejected(document):
    with pytest.raises(InvalidConfiguration):
        ringscore.init({"size": 0}, document=document)


def test_missing_container(document):
    with pytest.raises(MissingContainer) as info:
        ringscore.init({"container_id": "nowhere"}, document=document)
    assert info.value.context == {"container_id": "nowhere"}


def test_unknown_backend(document):
    with pytest.raises(MissingDependency):
        ringscore.init(document=document, backend="canvas2d")


def test_draw_emits_every_pass(document):
    gauge = ringscore.init(document=document)
    rings = gauge.draw(SCORES)
    assert [r.category for r in rings] == list(ringscore.CATEGORY_ORDER)

    elements = gauge.surface.elements
    paths = [e for e in elements if e.startswith("<path")]
    circles = [e for e in elements if e.startswith("<circle")]
    texts = [e for e in elements if e.startswith("<text")]
    # track + five rings + nutrition glow; zero-score glows are skipped
    assert len(paths) == 7
    assert len(circles) == 130 + 100
    assert len(texts) == 1
    assert ">25</text>" in texts[0]
    assert 'x="150" y="150"' in texts[0]
    assert document.get("canvas").children == [gauge.surface]


def test_track_drawn_first_as_full_ring(document):
    gauge = ringscore.init(document=document)
    gauge.draw(dict(SCORES, total=100))
    first = gauge.surface.elements[0]
    assert 'stroke="#FFFFFF"' in first
    assert 'stroke-width="35"' in first
    assert "149.99 50" in first


def test_glow_offset(document):
    gauge = ringscore.init(document=document)
    gauge.draw(SCORES)
    glows = [e for e in gauge.surface.elements if 'stroke-opacity="0.05"' in e]
    assert len(glows) == 1
    # nutrition sits on radius 50; the glow is shifted 4 units right
    assert 'd="M 154 100 A 50 50' in glows[0]


def test_reinit_clears_container(document):
    first = ringscore.init(document=document)
    first.draw(SCORES)
    assert document.get("canvas").has_children()

    second = ringscore.init(document=document)
    assert second.redraw
    assert len(document.get("canvas").children) == 0


def test_instances_do_not_share_state(document):
    a = ringscore.init({"container_id": "canvas", "size": 150}, document=document)
    b = ringscore.init({"container_id": "other"}, document=document)
    rings_a = a.draw(SCORES)
    rings_b = b.draw(SCORES)
    assert [r.radius for r in rings_a][:4] == [40, 35, 30, 25]
    assert [r.radius for r in rings_b][:4] == [80, 70, 60, 50]
    assert a.draw(SCORES) == rings_a


def test_repeated_draw_replaces_output(document):
    gauge = ringscore.init(document=document)
    gauge.draw(SCORES)
    count = len(gauge.surface.elements)
    gauge.draw(SCORES)
    assert len(gauge.surface.elements) == count
    assert len(document.get("canvas").children) == 1


def test_mobile_label_is_markup(document):
    gauge = ringscore.init(document=document, is_mobile=True)
    gauge.draw(dict(SCORES, total=42.0))
    children = document.get("canvas").children
    assert children[0] is gauge.surface
    assert isinstance(children[1], MarkupNode)
    assert "<p>42</p>" in children[1].to_markup()
    assert not any(e.startswith("<text") for e in gauge.surface.elements)
    assert 'class="score-text-wrapper"' in gauge.to_markup()


def test_redraw_correction_is_opt_in(document):
    ringscore.init(document=document).draw(SCORES)
    plain = ringscore.init(document=document)
    plain.draw(SCORES)
    assert 'y="150"' in [e for e in plain.surface.elements if e.startswith("<text")][0]

    corrected = ringscore.init(document=document, compensate_redraw=True)
    corrected.draw(SCORES)
    assert 'y="78.5"' in [e for e in corrected.surface.elements if e.startswith("<text")][0]


def test_error_compensation_moves_ticks(document):
    gauge = ringscore.init(document=document, error_compensation=0)
    gauge.draw(SCORES)
    first_tick = next(e for e in gauge.surface.elements if e.startswith("<circle"))
    assert 'cx="150" cy="35"' in first_tick


def test_larger_canvas(document):
    gauge = ringscore.init({"size": 600}, document=document)
    gauge.draw(SCORES)
    assert gauge.surface.to_markup().startswith(
        '<svg xmlns="http://www.w3.org/2000/svg" width="600" height="600" viewBox="0 0 600 600">'
    )
    assert gauge.style.total_arc_radius == 200


def test_stale_handle_cannot_reclaim_container(document):
    old = ringscore.init(document=document)
    old.draw(SCORES)
    new = ringscore.init({"size": 150}, document=document)
    new.draw(SCORES)

    with pytest.raises(MissingContainer) as info:
        old.draw(SCORES)
    assert info.value.context == {"container_id": "canvas"}
    assert document.get("canvas").children == [new.surface]
    assert document.get("canvas").owner is new
