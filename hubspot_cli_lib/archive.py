import asyncio
import io
import logging
import os
import shutil
import tempfile
import zipfile

logger = logging.getLogger(__name__)


def _extract(zip_data: bytes, name: str, dest: str, source_dir: str | None) -> None:
    with tempfile.TemporaryDirectory(prefix=f'{name}-') as tmp_dir:
        with zipfile.ZipFile(io.BytesIO(zip_data)) as archive:
            archive.extractall(tmp_dir)
        roots = os.listdir(tmp_dir)
        # GitHub zipballs wrap everything in a single "<owner>-<repo>-<sha>" folder
        if len(roots) == 1 and os.path.isdir(os.path.join(tmp_dir, roots[0])):
            root = os.path.join(tmp_dir, roots[0])
        else:
            root = tmp_dir
        source = os.path.join(root, source_dir.strip('/')) if source_dir else root
        if not os.path.exists(source):
            raise FileNotFoundError(f'{source_dir} not found in {name} archive')
        if os.path.isdir(source):
            shutil.copytree(source, dest, dirs_exist_ok=True)
        else:
            os.makedirs(dest, exist_ok=True)
            shutil.copy2(source, dest)


async def extract_zip_archive(
    zip_data: bytes | None,
    name: str,
    dest: str,
    *,
    source_dir: str | None = None,
) -> bool:
    if not zip_data:
        return False
    logger.debug('Extracting %s archive to %s', name, dest)
    try:
        await asyncio.to_thread(_extract, zip_data, name, dest, source_dir)
    except (zipfile.BadZipFile, OSError) as err:
        logger.error('An error occured extracting the project source.')
        logger.debug('%s', err)
        return False
    logger.debug('Completed project extraction.')
    return True
