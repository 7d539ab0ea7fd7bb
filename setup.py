import sys

vi = sys.version_info
if vi < (3, 8):
    raise RuntimeError('uriparts requires Python 3.8 or greater')
else:
    import pathlib

    from setuptools import setup


ROOT = pathlib.Path(__file__).parent


with open(str(ROOT / 'README.md')) as f:
    long_description = f.read()


with open(str(ROOT / 'uriparts' / '_version.py')) as f:
    for line in f:
        if line.startswith('__version__ ='):
            _, _, version = line.partition('=')
            VERSION = version.strip(" \n'\"")
            break
    else:
        raise RuntimeError(
            'unable to read the version from uriparts/_version.py')


setup(
    name='uriparts',
    version=VERSION,
    description='Parse URIs into scheme, authority, path, query and fragment.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Internet',
        'Development Status :: 3 - Alpha',
    ],
    platforms=['macOS', 'POSIX', 'Windows'],
    python_requires='>=3.8.0',
    zip_safe=False,
    license='MIT',
    packages=['uriparts', 'uriparts.parser'],
    include_package_data=True,
    test_suite='tests.suite',
)
