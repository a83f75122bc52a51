import requests

BASE_URL = "http://localhost:8000/api"

TRIP = {
    "name": "Lisbon & Porto",
    "startDate": "2024-07-14",
    "endDate": "2024-07-18",
    "arrivals": [{"date": "2024-07-14", "time": "10:30", "name": "Ana"}],
    "activities": [
        {"date": "2024-07-15", "startTime": "09:00", "endTime": "11:00", "name": "Belem walking tour"},
        {"date": "2024-07-16", "startTime": "19:30", "name": "Fado dinner"},
    ],
    "departures": [{"date": "2024-07-18", "time": "17:45", "name": "Ana"}],
}

def run_test():
    resp = requests.post(f"{BASE_URL}/itinerary/plan", json={"trip": TRIP, "policy": {"max_items_per_page": 2}})
    if resp.status_code != 200:
        print("Error:", resp.text)
        return
    plan = resp.json()
    print(f"\n{plan['summary']['name']}: {plan['summary']['date_range']}")
    print(plan["summary"]["stats_line"])
    for page in plan["pages"]:
        print(f"\nPage {page['number']}:")
        for day in page["days"]:
            print(f"- {day['title']}")
            for event in day["events"]:
                print(f"    {event['label']}")

    for fmt in ("pdf", "html"):
        resp = requests.post(f"{BASE_URL}/itinerary/export", params={"format": fmt}, json={"trip": TRIP})
        if resp.status_code == 200:
            filename = resp.headers["content-disposition"].split('filename="')[1].rstrip('"')
            with open(filename, "wb") as f:
                f.write(resp.content)
            print(f"\nSaved {filename} ({len(resp.content)} bytes)")
        else:
            print("Error:", resp.text)

if __name__ == "__main__":
    run_test()
