"""
python main.py -v --dry-run /media/camera/DCIM /media/archive/photos --mv
"""

from datetree.main import cli


if __name__ == "__main__":
    cli()
