# When parsing config file:
PROJECT_DIR_TOKEN = '$PROJECT_DIR'

PROJECT_DIR = '.'
CONFIG_DIR = 'config'
DEFAULT_CONFIG_PATH = f'{CONFIG_DIR}/imfs-default.cfg'

DEFAULT_TREE_ID = 'imfs'

READ_CHUNK_SIZE = 1024 * 1024

TS_FORMAT = '%Y-%m-%d %H:%M:%S'

CFG_SCAN_FOLLOW_SYMLINKS = 'scan.follow_symlinks'
CFG_SCAN_TREE_ID = 'scan.tree_id'
