"""Tests for reading and writing the vocabulary blob."""

import json

import numpy as np
import pytest

from word_space.errors import DataIntegrityError
from word_space.loaders import VocabularyLoader, load_vocabulary, save_vocabulary

WORDS = ["apple", "banana", "cherry"]


@pytest.fixture
def vectors():
    return np.arange(12, dtype=np.float32).reshape(3, 4)


def test_round_trip(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors, model="test-model")
    loader = VocabularyLoader(tmp_path)
    assert loader.exists()

    store = loader.load()
    assert store.words == WORDS
    assert store.dims == 4
    np.testing.assert_array_equal(store.vectors, vectors)
    assert loader.read_manifest() == {"count": 3, "dims": 4, "model": "test-model"}


def test_embeddings_file_layout(tmp_path, vectors):
    """embeddings.bin is N*D little-endian float32 values, row-major."""
    save_vocabulary(tmp_path, WORDS, vectors)
    raw = (tmp_path / "embeddings.bin").read_bytes()
    assert len(raw) == 3 * 4 * 4
    np.testing.assert_array_equal(np.frombuffer(raw, dtype="<f4"), np.arange(12))


def test_missing_files(tmp_path):
    loader = VocabularyLoader(tmp_path)
    assert not loader.exists()
    with pytest.raises(FileNotFoundError, match="vocab.json"):
        loader.load()

    (tmp_path / "vocab.json").write_text(json.dumps(WORDS))
    with pytest.raises(FileNotFoundError, match="embeddings.bin"):
        loader.load()


def test_dims_derived_without_manifest(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors)
    (tmp_path / "manifest.json").unlink()
    loader = VocabularyLoader(tmp_path)
    assert loader.read_manifest() == {}
    assert loader.load().dims == 4


def test_out_of_sync_files_rejected(tmp_path, vectors):
    """Adding a word without regenerating embeddings is caught."""
    save_vocabulary(tmp_path, WORDS, vectors)
    (tmp_path / "manifest.json").unlink()
    (tmp_path / "vocab.json").write_text(json.dumps(WORDS + ["damson", "elder"]))
    with pytest.raises(DataIntegrityError, match="not an integer"):
        VocabularyLoader(tmp_path).load()


def test_manifest_dims_checked(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors)
    (tmp_path / "manifest.json").write_text(json.dumps({"count": 3, "dims": 6}))
    with pytest.raises(DataIntegrityError, match="Declared dimensionality 6"):
        VocabularyLoader(tmp_path).load()


def test_manifest_count_checked(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors)
    (tmp_path / "manifest.json").write_text(json.dumps({"count": 5, "dims": 4}))
    with pytest.raises(DataIntegrityError, match="Manifest lists 5 words"):
        VocabularyLoader(tmp_path).load()


def test_bad_manifest(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors)
    (tmp_path / "manifest.json").write_text("[1, 2]")
    with pytest.raises(DataIntegrityError, match="JSON object"):
        VocabularyLoader(tmp_path).load()


def test_bad_vocab(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors)
    (tmp_path / "vocab.json").write_text(json.dumps({"apple": 0}))
    with pytest.raises(DataIntegrityError, match="array of strings"):
        VocabularyLoader(tmp_path).load()


def test_truncated_embeddings(tmp_path, vectors):
    save_vocabulary(tmp_path, WORDS, vectors)
    path = tmp_path / "embeddings.bin"
    path.write_bytes(path.read_bytes()[:-2])
    with pytest.raises(DataIntegrityError, match="multiple of 4"):
        VocabularyLoader(tmp_path).load()


def test_save_shape_mismatch(tmp_path):
    with pytest.raises(DataIntegrityError):
        save_vocabulary(tmp_path, WORDS, np.zeros((2, 4)))


def test_load_vocabulary(tmp_path, vectors):
    save_vocabulary(tmp_path / "blob", WORDS, vectors)
    store = load_vocabulary(tmp_path / "blob")
    assert store.index_of("cherry") == 2
    np.testing.assert_array_equal(store.row(1), vectors[1])


def test_corrupt_embeddings_rejected(tmp_path, vectors):
    corrupt = vectors.copy()
    corrupt[1, 2] = np.inf
    save_vocabulary(tmp_path, WORDS, corrupt)
    with pytest.raises(DataIntegrityError, match="non-finite.*'banana'"):
        load_vocabulary(tmp_path)
