from sitebuild.modules.assets import clean, bundle
from sitebuild.modules.devtools import serve, test, docs
