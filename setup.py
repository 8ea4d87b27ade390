from setuptools import setup, find_packages

setup(
    name='clockifish',
    version='1.0.0',
    description='A CLI for starting, stopping and reporting Clockify timers.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'markdown',
    ],
    entry_points={
        'console_scripts': [
            'clockifish=clockifish.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['clockifish.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
