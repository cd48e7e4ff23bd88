# mcqbank/__main__.py
import uvicorn

from mcqbank.utils.config import settings

def main():
    uvicorn.run("mcqbank.main:app", host=settings.host, port=settings.port)

if __name__ == "__main__":
    main()
