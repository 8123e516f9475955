"""Tests for retrieval.vector_index — exact cosine search."""

import math

import pytest

from retrieval import IndexEntry, TfidfEmbedder, VectorIndex


def _index(*pairs) -> VectorIndex:
    return VectorIndex.build(pairs)


class TestBuild:
    def test_preserves_order(self):
        index = _index(("a", [1.0, 0.0]), ("b", [0.0, 1.0]))
        assert [e.chunk_text for e in index.entries] == ["a", "b"]
        assert index.dimensions == 2
        assert len(index) == 2

    def test_accepts_index_entries(self):
        index = VectorIndex.build([IndexEntry(chunk_text="a", vector=[1.0])])
        assert len(index) == 1

    def test_inconsistent_dimensions(self):
        with pytest.raises(ValueError):
            _index(("a", [1.0, 0.0]), ("b", [1.0]))

    def test_does_not_retain_source_vectors(self):
        source = IndexEntry(chunk_text="a", vector=[1.0, 0.0])
        index = VectorIndex.build([source, IndexEntry(chunk_text="b", vector=[0.0, 1.0])])

        source.vector[0] = 0.0
        source.vector[1] = 1.0

        assert index.search([1.0, 0.0], 1) == ["a"]
        assert index.entries[0].vector == [1.0, 0.0]

    def test_entries_are_rebuilt_on_read(self):
        index = _index(("a", [3.0, 4.0]))

        first = index.entries
        first[0].vector[0] = 0.0

        assert index.entries[0].vector == [3.0, 4.0]
        assert index.search_hits([3.0, 4.0], 1)[0].score == pytest.approx(1.0)

    def test_build_empty(self):
        index = VectorIndex.build([])
        assert len(index) == 0
        assert index.dimensions == 0
        assert index.entries == []
        assert index.search([], 3) == []


class TestSearch:
    def test_sorted_by_similarity(self):
        index = _index(
            ("low", [0.0, 1.0]),
            ("high", [1.0, 0.0]),
            ("mid", [math.sqrt(0.5), math.sqrt(0.5)]),
        )
        hits = index.search_hits([1.0, 0.0], k=3)

        assert [h.text for h in hits] == ["high", "mid", "low"]
        scores = [h.score for h in hits]
        assert scores == sorted(scores, reverse=True)
        assert [h.rank for h in hits] == [1, 2, 3]

    def test_ties_keep_insertion_order(self):
        index = _index(
            ("first", [1.0, 0.0]),
            ("other", [0.0, 1.0]),
            ("second", [1.0, 0.0]),
            ("third", [1.0, 0.0]),
        )
        assert index.search([1.0, 0.0], k=3) == ["first", "second", "third"]

    def test_true_cosine_for_unnormalized_vectors(self):
        index = _index(("a", [3.0, 4.0]))
        hits = index.search_hits([6.0, 8.0], k=1)
        assert hits[0].score == pytest.approx(1.0)

    def test_zero_magnitude_scores_zero(self):
        index = _index(("zero", [0.0, 0.0]), ("unit", [1.0, 0.0]))

        hits = index.search_hits([1.0, 0.0], k=2)
        assert [h.text for h in hits] == ["unit", "zero"]
        assert hits[1].score == 0.0

        zero_query = index.search_hits([0.0, 0.0], k=2)
        assert [h.score for h in zero_query] == [0.0, 0.0]
        assert [h.text for h in zero_query] == ["zero", "unit"]
        assert not any(math.isnan(h.score) for h in zero_query)

    def test_k_larger_than_index(self):
        index = _index(("a", [0.0, 1.0]), ("b", [1.0, 0.0]))
        results = index.search([1.0, 0.0], k=10)
        assert results == ["b", "a"]

    def test_k_zero(self):
        assert _index(("a", [1.0])).search([1.0], k=0) == []

    def test_negative_k(self):
        with pytest.raises(ValueError):
            _index(("a", [1.0])).search([1.0], k=-1)

    @pytest.mark.parametrize("k", [0, 1, 5])
    def test_empty_index(self, k):
        assert VectorIndex.build([]).search([], k=k) == []
        assert VectorIndex.build([]).search([1.0, 2.0], k=k) == []

    def test_dimension_mismatch(self):
        with pytest.raises(ValueError):
            _index(("a", [1.0, 0.0])).search([1.0, 0.0, 0.0], k=1)


class TestEndToEnd:
    def test_cat_chunk_ranks_first(self, cat_dog_chunks, cat_dog_embedder):
        index = VectorIndex.build(
            (chunk.text, cat_dog_embedder.embed(chunk.text)) for chunk in cat_dog_chunks
        )
        query = cat_dog_embedder.embed("where did the cat go")

        assert index.search(query, 1) == ["the cat sat"]
        hits = index.search_hits(query, 2)
        assert hits[0].score > hits[1].score

    def test_stored_vectors_have_unit_or_zero_norm(self, cat_dog_chunks, cat_dog_embedder):
        index = VectorIndex.build(
            (chunk.text, cat_dog_embedder.embed(chunk.text)) for chunk in cat_dog_chunks
        )
        for entry in index.entries:
            norm = math.sqrt(sum(v * v for v in entry.vector))
            assert norm == pytest.approx(0.0) or norm == pytest.approx(1.0)

    def test_sample_corpus(self):
        from chunking import split_text

        text = "alpha beta gamma. delta epsilon zeta. eta theta iota. beta theta kappa."
        chunks = split_text(text, chunk_size=20, overlap=4)
        embedder = TfidfEmbedder.fit(chunks)
        index = VectorIndex.build((c.text, embedder.embed(c.text)) for c in chunks)

        results = index.search(embedder.embed("epsilon"), k=len(chunks))
        assert len(results) == len(chunks)
        assert len(set(results)) == len(results)
        assert "epsilon" in results[0]
