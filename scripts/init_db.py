from app.db.engine import get_engine
from app.db.schema import metadata

def main():
    # users rows belong to other systems; only create what is missing
    engine = get_engine()
    metadata.create_all(engine)
    print("DB schema ensured (users).")

if __name__ == "__main__":
    main()
