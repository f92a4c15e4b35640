import logging
import os
import tempfile
import unittest

from pydispatch import dispatcher

from imfs.app_config import AppConfig
from imfs.cache import Cache
from imfs.constants import DEFAULT_TREE_ID
from imfs.error import LocationAlreadyExistsError, LocationDoesNotExistError, LocationNotADirectoryError
from imfs.model.fs_item import Directory, File
from imfs.signal_constants import Signal
from tree_fixture import INITIAL_LOCAL_TREE, build_tree_on_disk, count_nodes

logger = logging.getLogger(__name__)


class CacheTest(unittest.TestCase):
    """
    ▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼
    CLASS CacheTest

    Each test gets a fresh copy of INITIAL_LOCAL_TREE on disk, in a temp dir, and a Cache loaded from it.
    ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼
    """

    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.root_path = os.path.join(self._temp_dir.name, 'Root')
        os.mkdir(self.root_path)
        build_tree_on_disk(self.root_path, INITIAL_LOCAL_TREE)
        self.cache = Cache(self.root_path)

    def tearDown(self) -> None:
        self._temp_dir.cleanup()

    def _path(self, *segments) -> str:
        return os.path.join(self.root_path, *segments)

    # TESTS
    # ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼ ▼

    def test_root_is_dir(self):
        self.assertTrue(self.cache.exists(self.root_path))
        root = self.cache.read(self.root_path)
        self.assertIsInstance(root, Directory)
        self.assertTrue(root.is_dir())
        self.assertEqual(self.root_path, root.location)
        self.assertEqual(self.root_path, self.cache.location())

    def test_nonexistent_root(self):
        missing_path = self._path('does-not-exist')
        with self.assertRaises(LocationDoesNotExistError) as context:
            Cache(missing_path)
        self.assertEqual(missing_path, context.exception.location)

    def test_every_entry_on_disk_is_mirrored(self):
        entry_count = 0
        for dir_path, dir_names, file_names in os.walk(self.root_path):
            for name in dir_names:
                entry_count += 1
                path = os.path.join(dir_path, name)
                self.assertTrue(self.cache.exists(path), path)
                self.assertTrue(self.cache.is_dir(path), path)
                self.assertIsInstance(self.cache.read(path), Directory)
            for name in file_names:
                entry_count += 1
                path = os.path.join(dir_path, name)
                self.assertTrue(self.cache.exists(path), path)
                self.assertFalse(self.cache.is_dir(path), path)
                item = self.cache.read(path)
                self.assertIsInstance(item, File)
                self.assertEqual(name, item.name)
                self.assertEqual(path, item.location)
                self.assertEqual(os.path.getsize(path), item.size)
                with open(path, 'rb') as f:
                    self.assertEqual(f.read(), item.buffer)

        self.assertEqual(count_nodes(INITIAL_LOCAL_TREE), entry_count)
        self.assertEqual(entry_count + 1, len(self.cache))

    def test_file_timestamps_come_from_disk(self):
        path = self._path('notes.txt')
        stat = os.stat(path)
        item = self.cache.read(path)
        self.assertEqual(int(stat.st_mtime * 1000), item.modified)

    def test_exists_is_verbatim(self):
        self.assertTrue(self.cache.exists(self._path('Art')))
        self.assertFalse(self.cache.exists(self._path('Art') + os.sep))
        self.assertFalse(self.cache.exists(self._path('art')))
        self.assertFalse(self.cache.exists(self._path('notes.txt', 'does-not-exist')))

    def test_read_returns_copy(self):
        path = self._path('Angry-Clown.jpg')
        original = self.cache.read(path)
        item = self.cache.read(path)
        item.buffer = b'changed'
        item.size = 7
        item.name = 'Happy-Clown.jpg'

        self.assertEqual(original, self.cache.read(path))
        self.assertNotEqual(item, self.cache.read(path))

    def test_read_absent(self):
        with self.assertRaises(LocationDoesNotExistError):
            self.cache.read(self._path('nope.txt'))

    def test_mkdir(self):
        location = self._path('a')
        self.cache.mkdir(location)
        self.assertTrue(self.cache.exists(location))
        self.assertTrue(self.cache.is_dir(location))
        self.assertEqual([], self.cache.list_dir(location))

        count_before = len(self.cache)
        with self.assertRaises(LocationAlreadyExistsError) as context:
            self.cache.mkdir(location)
        self.assertEqual(location, context.exception.location)
        self.assertEqual(count_before, len(self.cache))
        self.assertEqual(1, [item.location for item in self.cache.list_dir(self.root_path)].count(location))

    def test_mkdir_existing_scanned_dir(self):
        with self.assertRaises(LocationAlreadyExistsError):
            self.cache.mkdir(self._path('Art', 'Modern'))

    def test_mkdir_same_name_with_trailing_separator(self):
        with self.assertRaises(LocationAlreadyExistsError):
            self.cache.mkdir(self._path('Art') + os.sep)

    def test_mkdir_is_not_recursive(self):
        count_before = len(self.cache)
        with self.assertRaises(LocationDoesNotExistError) as context:
            self.cache.mkdir(self._path('x', 'y'))
        self.assertEqual(self._path('x'), context.exception.location)
        self.assertEqual(count_before, len(self.cache))
        self.assertFalse(self.cache.exists(self._path('x')))

    def test_relative_root_with_dot_prefix(self):
        orig_cwd = os.getcwd()
        os.chdir(self._temp_dir.name)
        try:
            root_path = os.path.join(os.curdir, 'Root')
            cache = Cache(root_path)
            self.assertEqual(len(self.cache), len(cache))
            self.assertTrue(cache.exists(os.path.join(root_path, 'Art', 'Modern')))

            new_dir = os.path.join(root_path, 'a')
            cache.mkdir(new_dir)
            self.assertTrue(cache.is_dir(new_dir))
            new_file = os.path.join(new_dir, 'f.txt')
            cache.write(new_file, 'f.txt', b'relative')
            self.assertEqual(b'relative', cache.read(new_file).buffer)
            self.assertEqual([new_dir], [item.location for item in cache.list_dir(root_path) if item.get_name() == 'a'])

            with self.assertRaises(LocationAlreadyExistsError):
                cache.mkdir(os.path.join(root_path, 'Art') + os.sep)
        finally:
            os.chdir(orig_cwd)

    def test_mkdir_under_file(self):
        with self.assertRaises(LocationNotADirectoryError):
            self.cache.mkdir(self._path('notes.txt', 'sub'))

    def test_write(self):
        self.cache.mkdir(self._path('a'))
        location = self._path('a', 'f.txt')
        content = b'Hello World!'
        self.cache.write(location, 'f.txt', content)

        item = self.cache.read(location)
        self.assertIsInstance(item, File)
        self.assertEqual(content, item.buffer)
        self.assertEqual(len(content), item.size)
        self.assertEqual('f.txt', item.name)
        self.assertEqual(item.created, item.modified)
        self.assertEqual([item], self.cache.list_dir(self._path('a')))

    def test_write_never_overwrites(self):
        self.cache.mkdir(self._path('a'))
        location = self._path('a', 'f.txt')
        self.cache.write(location, 'f.txt', b'first')
        with self.assertRaises(LocationAlreadyExistsError):
            self.cache.write(location, 'f.txt', b'second')
        self.assertEqual(b'first', self.cache.read(location).buffer)

        # scanned files are not overwritten either
        with self.assertRaises(LocationAlreadyExistsError):
            self.cache.write(self._path('notes.txt'), 'notes.txt', b'')

    def test_write_copies_mutable_buffer(self):
        location = self._path('data.bin')
        buffer = bytearray(b'\x00\x01\x02')
        self.cache.write(location, 'data.bin', buffer)
        buffer[0] = 0xff
        item = self.cache.read(location)
        self.assertEqual(b'\x00\x01\x02', item.buffer)
        self.assertIsInstance(item.buffer, bytes)

    def test_write_without_parent(self):
        with self.assertRaises(LocationDoesNotExistError):
            self.cache.write(self._path('a', 'f.txt'), 'f.txt', b'x')
        self.assertFalse(self.cache.exists(self._path('a', 'f.txt')))

    def test_write_under_file(self):
        with self.assertRaises(LocationNotADirectoryError):
            self.cache.write(self._path('notes.txt', 'f.txt'), 'f.txt', b'x')

    def test_remove_dir_with_written_file(self):
        count_before = len(self.cache)
        self.cache.mkdir(self._path('a'))
        self.cache.write(self._path('a', 'f.txt'), 'f.txt', b'bytes')

        self.cache.remove(self._path('a'))
        self.assertFalse(self.cache.exists(self._path('a')))
        self.assertFalse(self.cache.exists(self._path('a', 'f.txt')))
        self.assertEqual(count_before, len(self.cache))

    def test_remove_scanned_subtree(self):
        art_subtree = [self._path('Art'),
                       self._path('Art', 'Dark-Art.png'),
                       self._path('Art', 'Hokusai_Great-Wave.jpg'),
                       self._path('Art', 'Modern'),
                       self._path('Art', 'Modern', '1923-art.jpeg'),
                       self._path('Art', 'Modern', 'Dunno.jpg')]
        count_before = len(self.cache)

        self.cache.remove(self._path('Art'))

        for location in art_subtree:
            self.assertFalse(self.cache.exists(location), location)
        self.assertEqual(count_before - len(art_subtree), len(self.cache))
        self.assertTrue(self.cache.exists(self._path('Empty')))
        self.assertTrue(self.cache.exists(self._path('notes.txt')))
        self.assertNotIn(self._path('Art'), [item.location for item in self.cache.list_dir(self.root_path)])

        # storage is untouched
        self.assertTrue(os.path.isdir(self._path('Art', 'Modern')))

    def test_remove_file_then_write_again(self):
        location = self._path('notes.txt')
        self.cache.remove(location)
        self.assertFalse(self.cache.exists(location))
        self.cache.write(location, 'notes.txt', b'rewritten')
        self.assertEqual(b'rewritten', self.cache.read(location).buffer)

    def test_remove_absent(self):
        location_list = [item.location for item in self.cache.list_dir(self.root_path)]
        count_before = len(self.cache)

        with self.assertRaises(LocationDoesNotExistError) as context:
            self.cache.remove(self._path('Art', 'nope'))
        self.assertEqual(self._path('Art', 'nope'), context.exception.location)

        self.assertEqual(count_before, len(self.cache))
        self.assertEqual(location_list, [item.location for item in self.cache.list_dir(self.root_path)])

    def test_remove_root(self):
        self.cache.remove(self.root_path)
        self.assertEqual(0, len(self.cache))
        self.assertFalse(self.cache.exists(self.root_path))
        self.assertFalse(self.cache.exists(self._path('Art')))
        self.assertEqual('', self.cache.show())
        with self.assertRaises(LocationDoesNotExistError):
            self.cache.mkdir(self._path('a'))

    def test_list_dir(self):
        name_list = [item.get_name() for item in self.cache.list_dir(self._path('Art'))]
        self.assertEqual(['Dark-Art.png', 'Hokusai_Great-Wave.jpg', 'Modern'], name_list)
        self.assertEqual([], self.cache.list_dir(self._path('Empty')))

        with self.assertRaises(LocationNotADirectoryError):
            self.cache.list_dir(self._path('notes.txt'))
        with self.assertRaises(LocationDoesNotExistError):
            self.cache.list_dir(self._path('nope'))

    def test_is_dir_absent(self):
        with self.assertRaises(LocationDoesNotExistError):
            self.cache.is_dir(self._path('nope'))

    def test_within(self):
        self.assertTrue(self.cache.within(self.root_path))
        self.assertTrue(self.cache.within(self._path('Art', 'Modern', 'not-in-cache-yet')))
        self.assertFalse(self.cache.within(self.root_path + 'Sibling'))
        self.assertFalse(self.cache.within(self._temp_dir.name))

    def test_show(self):
        text = self.cache.show()
        self.assertIn('Root/', text)
        self.assertIn('Art/', text)
        self.assertIn('Dunno.jpg', text)
        self.assertLess(text.index('Modern/'), text.index('Dunno.jpg'))

        text = self.cache.show(show_identifier=True)
        self.assertIn(f'[{self._path("Art", "Modern")}]', text)

    def test_mutation_signals(self):
        upserted_list = []
        removed_list = []

        def on_node_upserted(sender, item):
            upserted_list.append((sender, item))

        def on_node_removed(sender, location, count_removed):
            removed_list.append((sender, location, count_removed))

        dispatcher.connect(on_node_upserted, signal=Signal.NODE_UPSERTED_IN_CACHE)
        dispatcher.connect(on_node_removed, signal=Signal.NODE_REMOVED_IN_CACHE)
        try:
            self.cache.mkdir(self._path('a'))
            self.cache.write(self._path('a', 'f.txt'), 'f.txt', b'xyz')
            self.cache.remove(self._path('a'))
        finally:
            dispatcher.disconnect(on_node_upserted, signal=Signal.NODE_UPSERTED_IN_CACHE)
            dispatcher.disconnect(on_node_removed, signal=Signal.NODE_REMOVED_IN_CACHE)

        self.assertEqual([DEFAULT_TREE_ID, DEFAULT_TREE_ID], [sender for sender, _ in upserted_list])
        self.assertEqual([self._path('a'), self._path('a', 'f.txt')], [item.location for _, item in upserted_list])
        self.assertEqual([(DEFAULT_TREE_ID, self._path('a'), 2)], removed_list)

    def test_settings_from_app_config(self):
        app_config = AppConfig(init_logging=False)
        cache = Cache(self.root_path, app_config=app_config)
        self.assertEqual('imfs', cache.tree_id)
        self.assertEqual(len(self.cache), len(cache))


if __name__ == '__main__':
    unittest.main()
