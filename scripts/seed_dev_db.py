from storefront.core.logging import configure_logging, get_logger
from storefront.db.seed import seed_initial_data
from storefront.db.session import session_scope


# 开发库灌初始品牌/商品类型：python -m scripts.seed_dev_db
# 可重复执行，已存在的业务键会跳过

def main():
    configure_logging()
    logger = get_logger("scripts.seed")
    with session_scope() as db:
        counts = seed_initial_data(db)
    logger.info("Done: %s", counts)

if __name__ == "__main__":
    main()
