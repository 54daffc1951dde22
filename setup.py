import ast,setuptools

def get_version(fname):
  "grab __version__ variable from fname (assuming fname is a python file). parses without importing."
  assign_stmts = [s for s in ast.parse(open(fname).read()).body if isinstance(s,ast.Assign)]
  valid_targets = [s for s in assign_stmts if len(s.targets) == 1 and s.targets[0].id == '__version__']
  return valid_targets[-1].value.value # fail if valid_targets empty

setuptools.setup(
  name='sqlwhere',
  version=get_version('sqlwhere/version.py'),
  description='sql where-clause evaluator with three-valued (null-aware) logic',
  classifiers=[
    'Development Status :: 4 - Beta',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Database',
    'Topic :: Software Development :: Interpreters',
    'Topic :: Education',
  ],
  keywords=['sql','null','three-valued logic','where','database','teaching'],
  license='MIT',
  packages=setuptools.find_packages(exclude=['test_sqlwhere']),
  install_requires=['ply==3.11','ujson'],
  extras_require={
    'test':['pytest'],
  },
)
