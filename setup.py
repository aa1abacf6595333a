
from setuptools import setup

setup(
    name='wordpredictor',
    version='0.1.0',
    description='predict the next word in a sequence from cumulative ' \
        'successor probabilities',
    license='MIT',
    package_dir={'': 'src'},
    packages=['wordpredictor'],
    python_requires='>=3.6',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        ])
