"""
Tests for markup.source

Test Coverage:
- Source construction rules (ratio, media queries)
- sizes attribute rendering
- srcset collection: URL and descriptor de-duplication, ordering
- <source> / <img> element rendering and alt escaping
"""

import pytest

from responsive_slots.core.errors import ConfigurationError
from responsive_slots.core.models import Size, Src
from responsive_slots.generators import SrcsetGenerator
from responsive_slots.markup import Source


class WidthGenerator(SrcsetGenerator):
    """Offers one URL per size, named after min_width."""

    def list_for(self, image, size):
        return [Src(f"/{size.min_width}/{image}", width=size.min_width)]


class FixedGenerator(SrcsetGenerator):
    """Offers the same entries for every size."""

    def __init__(self, srcs):
        self.srcs = srcs

    def list_for(self, image, size):
        return list(self.srcs)


class PerSizeGenerator(SrcsetGenerator):
    """Offers entries keyed by the size's min_width."""

    def __init__(self, srcs_by_width):
        self.srcs_by_width = srcs_by_width

    def list_for(self, image, size):
        return list(self.srcs_by_width[size.min_width])


MOBILE = "(max-width: 600px)"


class TestSourceInit:
    """Tests for Source construction."""

    def test_init_when_empty_then_raises_error(self):
        with pytest.raises(ConfigurationError, match="at least one size"):
            Source(())

    def test_init_when_ratios_differ_then_raises_error(self):
        """One source carries one aspect ratio."""
        with pytest.raises(ConfigurationError, match="one aspect ratio"):
            Source((Size(320, 1.5, media_query=MOBILE), Size(640, 2.0)), as_image=True)

    def test_init_when_inner_size_without_media_query_then_raises_error(self):
        """Only the final size may be unconditional."""
        with pytest.raises(ConfigurationError, match="not the last"):
            Source((Size(320, 1.5), Size(640, 1.5)), as_image=True)

    def test_init_when_source_closed_without_media_query_then_raises_error(self):
        """A <source> needs a media attribute."""
        with pytest.raises(ConfigurationError, match="needs a media query"):
            Source((Size(320, 1.5),))

    def test_init_when_image_without_media_query_then_valid(self):
        source = Source([Size(320, 1.5)], as_image=True)

        assert source.sizes == (Size(320, 1.5),)
        assert source.aspect_ratio == 1.5


class TestSourceRendering:
    """Tests for Source rendering."""

    def test_render_sizes_when_several_then_last_width_only(self):
        """Conditions precede every entry except the last."""
        source = Source(
            (Size(320, 1.5, media_query=MOBILE), Size(640, 1.5, media_query="(min-width: 601px)")),
        )

        assert source.render_sizes() == "(max-width: 600px) 320px, 640px"

    def test_render_sizes_when_viewport_width_then_vw(self):
        source = Source((Size(320, 1.5, viewport_width=100),), as_image=True)
        assert source.render_sizes() == "100vw"

    def test_collect_srcset_when_duplicate_urls_then_first_kept_and_sorted(self):
        """Entries are unique by URL and ordered by descriptor."""
        generator = FixedGenerator([
            Src("/b.jpg", width=640),
            Src("/a.jpg", width=320),
            Src("/b.jpg", width=999),
        ])
        source = Source((Size(320, 1.5, media_query=MOBILE), Size(640, 1.5)), as_image=True)

        result = source.collect_srcset(generator, "cat.jpg")

        assert result == [Src("/a.jpg", width=320), Src("/b.jpg", width=640)]

    def test_collect_srcset_when_same_width_under_other_url_then_first_kept(self):
        """Two URLs never share one width descriptor."""
        generator = PerSizeGenerator({
            320: [Src("/files/cat.jpg", width=340)],
            640: [Src("/styles/s340/cat.jpg", width=340), Src("/styles/s680/cat.jpg", width=680)],
        })
        source = Source((Size(320, 1.5, media_query=MOBILE), Size(640, 1.5)), as_image=True)

        result = source.collect_srcset(generator, "cat.jpg")

        assert result == [Src("/files/cat.jpg", width=340), Src("/styles/s680/cat.jpg", width=680)]

    def test_collect_srcset_when_bare_url_and_1x_then_one_kept(self):
        """A bare URL already stands for 1x."""
        generator = FixedGenerator([
            Src("/a.jpg"),
            Src("/a-1x.jpg", multiplier=1.0),
            Src("/a-2x.jpg", multiplier=2.0),
        ])
        source = Source((Size(320, 1.5),), as_image=True)

        result = source.collect_srcset(generator, "cat.jpg")

        assert [src.render() for src in result] == ["/a.jpg", "/a-2x.jpg 2x"]

    def test_render_when_source_then_media_from_last_size(self):
        source = Source((Size(320, 1.5, media_query=MOBILE),))

        html = source.render(WidthGenerator(), "cat.jpg", alt="ignored")

        assert html == (
            '<source srcset="/320/cat.jpg 320w" sizes="320px" media="(max-width: 600px)">'
        )

    def test_render_when_image_then_img_with_all_sizes(self):
        source = Source((Size(320, 1.5, media_query=MOBILE), Size(640, 1.5)), as_image=True)

        html = source.render(WidthGenerator(), "cat.jpg")

        assert html == (
            '<img srcset="/320/cat.jpg 320w, /640/cat.jpg 640w" '
            'sizes="(max-width: 600px) 320px, 640px">'
        )

    def test_render_when_alt_then_escaped(self):
        """Alt text is HTML-escaped."""
        source = Source((Size(320, 1.5),), as_image=True)

        html = source.render(WidthGenerator(), "cat.jpg", alt='A "cat" & <dog>')

        assert html.endswith(' alt="A &quot;cat&quot; &amp; &lt;dog&gt;">')

    def test_render_when_no_srcs_then_empty_srcset(self):
        """An empty selection still renders the element."""
        source = Source((Size(320, 1.5),), as_image=True)

        html = source.render(FixedGenerator([]), "cat.jpg")

        assert html == '<img srcset="" sizes="320px">'
