# jonoondb

Building blocks of a document database engine, in pure Python: column
indexers that answer comparison filters with bitmaps of document ids, and the
helpers around them (varints, an object pool, a memory-mapped file, SQLite
connection setup, options and an exception hierarchy).

## Install

    pip install .

The only runtime dependency is `psutil`, used for process memory statistics.

## Modules

- `jonoondb.exceptions` – `JonoonDBException` and its subclasses
  (`InvalidArgumentException`, `MissingDatabaseFileException`,
  `MissingDatabaseFolderException`, `OutOfMemoryException`,
  `DuplicateKeyException`, `CollectionAlreadyExistException`,
  `IndexAlreadyExistException`, `CollectionNotFoundException`,
  `InvalidSchemaException`, `IndexOutOfBoundException`, `SQLException`,
  `FileIOException`, `MissingDocumentException`, `ApiMisuseException`).
  Each carries `message`, `source_file`, `function` and `line`;
  `describe()` returns a one-line summary naming the exception type.
- `jonoondb.null_helpers` – the NULL sentinels (`JONOONDB_NULL_STR`, four
  zero characters; `JONOONDB_NULL_INT32`; `JONOONDB_NULL_INT64`;
  `JONOONDB_NULL_DOUBLE`, the smallest positive normal double) and
  `is_null(value)` for strings, bytes, integers and floats.
- `jonoondb.text` – `split(text, separators)` splits on any of the separator
  characters and drops empty tokens; `normalize_path(path)` appends a
  trailing `/` (and turns `\` into `/` on Windows).
- `jonoondb.varint` – `encode_varint`, `decode_varint` (returns the value and
  the number of bytes read; raises `ValueError` on truncated input or more
  than `MAX_VARINT_BYTES` bytes), the zig-zag helpers `zigzag_encode32`,
  `zigzag_decode32`, `zigzag_encode64`, `zigzag_decode64`, and
  `on_little_endian_machine()`.
- `jonoondb.stopwatch.Stopwatch` – `start`, `stop`, `reset`, `restart` and
  whole `elapsed_seconds`, `elapsed_milliseconds`, `elapsed_microseconds`,
  accumulated over all running intervals.
- `jonoondb.options` – the `Options` dataclass (`create_db_if_missing=True`,
  `max_data_file_size` of 1 GiB, `memory_cleanup_threshold` of 4 GiB) and
  `WriteOptions` (`compress=False`, `verify_documents=True`).
- `jonoondb.procutils.get_process_memory_stats()` – a `ProcessMemStat` with the
  resident memory of the current process.
- `jonoondb.object_pool.ObjectPool` – a bounded, thread-safe pool. `take()`
  hands out an idle object or allocates a new one; `give_back(obj)` resets and
  keeps it, or passes it to the deallocator when the pool is full; `lease()` is
  a context manager around the two; `close()` deallocates the idle objects.
- `jonoondb.mmap_file.MemoryMappedFile` – maps an existing file read-only or
  read-write (`MemoryMappedFileMode`). `write(data)` appends at
  `current_write_offset`, `view(offset, length)` copies bytes out, and
  `flush(offset, num_bytes)` flushes a page-aligned range.
- `jonoondb.bitmap.Bitmap` – a set of document ids with `add`,
  `logical_and`, `logical_or`, `logical_xor`, `logical_not`,
  `in_place_logical_not`, `Bitmap.and_all`, `Bitmap.or_all`, `reset`,
  `is_empty`, iteration in ascending order and the `&`, `|`, `^`, `~`
  operators.
- `jonoondb.index_info` – `IndexType`, `FieldType`, `field_type_name`, and the
  `IndexInfo` and `IndexStat` dataclasses.
- `jonoondb.sqlite_utils` – `normalize_path_and_connect(db_path, db_name,
  create_db_if_missing)` opens `<db_path>/<db_name>.dat` after checking that
  the folder (and, unless asked to create it, the file) exists;
  `close_connection` and `busy_handler` round it off.
- `jonoondb.indexer` – `Constraint` (an operator from `ConstraintOperator`
  and an operand whose `OperandType` is inferred from its Python type),
  `resolve_field` for dotted paths into nested mappings, and the abstract
  `Indexer`.
- `jonoondb.vector_integer.VectorIntegerIndexer`,
  `jonoondb.vector_double.VectorDoubleIndexer`,
  `jonoondb.vector_string.VectorStringIndexer`,
  `jonoondb.vector_blob.VectorBlobIndexer` – indexers of type
  `IndexType.VECTOR` that keep one value per document, in document-id order,
  and answer `filter` and `filter_range` by scanning.

## Indexers

Documents are nested mappings; the index column name is a dotted path into
them. Document ids must be inserted in order starting at 0, otherwise
`InvalidArgumentException` is raised. A missing field is stored as the NULL
sentinel of the column type; NULL strings and empty blobs never match a
filter.

    from jonoondb.index_info import FieldType, IndexInfo, IndexType
    from jonoondb.indexer import Constraint, ConstraintOperator
    from jonoondb.vector_integer import VectorIntegerIndexer

    info = IndexInfo(name="by_age", type=IndexType.VECTOR, column_name="user.age")
    index = VectorIntegerIndexer(info, FieldType.INT32)
    index.insert(0, {"user": {"age": 30}})
    index.insert(1, {"user": {"age": 41}})

    older = index.filter(Constraint(ConstraintOperator.GREATER_THAN, 35))
    print(list(older))              # [1]
    print(index.integer_value(0))   # 30

`ConstraintOperator.MATCH` is not supported by any indexer and raises
`JonoonDBException`.

## Other examples

    from jonoondb.varint import encode_varint, decode_varint

    data = encode_varint(300)
    value, size = decode_varint(data)   # (300, 2)

    from jonoondb.bitmap import Bitmap

    evens = Bitmap([0, 2, 4])
    small = Bitmap([0, 1, 2])
    print(list(evens.logical_and(small)))   # [0, 2]

## What it does not do

This package has no database object: there are no collections, no document
storage or blob files, no schema handling, no SQL query execution and no
result sets. It offers no command-line tool or server. The pieces above are
meant to be composed into such an engine.

## Tests

    pip install .[test]
    pytest