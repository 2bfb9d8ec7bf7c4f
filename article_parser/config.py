from pathlib import Path
from dotenv import load_dotenv
import os

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(BASE_DIR / '.env')

DEBUG_MODE = os.getenv('DEBUG_MODE', 'False').lower() in ('1','true','yes')
INPUT_FILE = os.getenv('INPUT_FILE', 'output.html')
OUTPUT_FILE = os.getenv('OUTPUT_FILE', 'output_article.txt')
PREVIEW_CHARS = int(os.getenv('PREVIEW_CHARS', 4000))
