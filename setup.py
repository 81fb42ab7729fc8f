import setuptools
from os.path import join, dirname

def get_file_contents(filename):
    package_directory = dirname(__file__)
    with open(join(package_directory, filename), 'r', encoding='utf-8') as file:
        contents = file.read()
    return contents

long_description = """Level-wise mining of spatially coherent itemsets across labeled 3-D point sets,
with permutation-based significance estimation.
"""
version = get_file_contents(join('motifminer', 'version.txt')).strip()

setuptools.setup(
    name='motifminer',
    version=version,
    description='Spatial itemset mining with geometric candidate matching and significance estimation.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=[
        'motifminer',
        'motifminer.standalone_utilities',
        'motifminer.model',
        'motifminer.geometry',
        'motifminer.alignment',
        'motifminer.configuration',
        'motifminer.metrics',
        'motifminer.mining',
        'motifminer.mapping',
        'motifminer.analysis',
        'motifminer.analysis.statistics',
        'motifminer.analysis.association',
    ],
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Intended Audience :: Science/Research',
    ],
    package_data={
        'motifminer': [
            'version.txt',
        ],
    },
    python_requires='>=3.10',
    install_requires=[
        'numpy>=1.22.3',
        'scipy>=1.8.0',
        'pandas>=1.1.5',
        'attrs>=22.2.0',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
