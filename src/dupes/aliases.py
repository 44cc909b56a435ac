from dupes.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "xxhash": HashAlgorithmName.XXHASH,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = "Content hash used to tell same-size files apart:\n" + "".join(
    f"  {alias:<10} : {name.description}\n" for alias, name in ALGORITHM_ALIASES.items()
)

EPILOG_TEXT = """
Output:
  Sizes are listed in ascending order. Under each size either the files are
  listed directly (unique files, or groups compared by size only), or each
  content hash is listed with the files sharing it indented below.

Examples:
  Find duplicates in the current directory
  %(prog)s

  Scan two trees, ignoring files below 4KB and anything under .git
  %(prog)s -d ~/Photos -d /mnt/backup/Photos -i 4K -e '/\\.git(/|$)'

  Compare every file regardless of size (may read a lot of data)
  %(prog)s -d ~/Videos -a 0

  List files under ~/Photos that have no copy anywhere under /mnt/backup
  %(prog)s -d ~/Photos -D /mnt/backup

  Machine-readable output
  %(prog)s -d ~/Downloads -j > report.json
"""
