import setuptools

setuptools.setup(
    name='dtstamp',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    version='1.0.0',
    description='Convert local date/time strings into Discord timestamp tags',
    long_description=open('README.md', 'r').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.9',
    install_requires=[
        'prettytable>=3.3',
        'pyperclip',
    ],
    extras_require={
        'test': [
            'pytest',
            'tzdata',
        ],
    },
    entry_points={
        'console_scripts': [
            'dt=dtstamp.dt:console',
        ],
    },
)
