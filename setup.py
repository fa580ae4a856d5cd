import os
from setuptools import setup, find_packages

# Read README for long description if available
long_description = ""
if os.path.exists("README.md"):
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name='brcm-firmware-tool',
    version='2.1.0',
    description='Packages Broadcom Bluetooth INF firmware into BrcmPatchRAM firmware folders, manifest and injector kexts.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.9',

    install_requires=[
        'pygments>=2.19.1',
    ],

    extras_require={
        'test': ['pytest>=7.0'],
    },

    include_package_data=True,

    entry_points={
        'console_scripts': [
            'brcm-firmware=brcm_firmware.cli:run',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Environment :: Console',
    ],
)
